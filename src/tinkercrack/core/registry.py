from __future__ import annotations

from typing import Any, Optional, Protocol

from .config import CrackConfig
from .errors import InvalidInput
from .results import Candidate


class CipherPlugin(Protocol):
    name: str

    def encode(self, plaintext: bytes, key: Any) -> bytes:
        ...

    def decode(self, ciphertext: bytes, key: Any) -> bytes:
        ...

    def crack(
        self,
        ciphertext: bytes,
        *,
        config: Optional[CrackConfig] = None,
        key_length: Optional[int] = None,
    ) -> Candidate:
        ...


_PLUGINS: dict[str, CipherPlugin] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = plugin


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = cipher_name.lower().strip()
    if name not in _PLUGINS:
        raise InvalidInput(
            f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}",
            {"cipher": cipher_name},
        )
    return _PLUGINS[name]


def encrypt_known(cipher_name: str, plaintext: bytes, key: Optional[str]) -> bytes:
    if key is None:
        raise InvalidInput("This encrypt operation requires --key.")
    return get_plugin(cipher_name).encode(plaintext, key)


def decrypt_known(cipher_name: str, ciphertext: bytes, key: Optional[str]) -> bytes:
    if key is None:
        raise InvalidInput("This decrypt operation requires --key.")
    return get_plugin(cipher_name).decode(ciphertext, key)


def crack_known(
    cipher_name: str,
    ciphertext: bytes,
    *,
    config: Optional[CrackConfig] = None,
    key_length: Optional[int] = None,
) -> Candidate:
    """Recover the key of a ciphertext whose cipher family is already known."""
    return get_plugin(cipher_name).crack(ciphertext, config=config, key_length=key_length)
