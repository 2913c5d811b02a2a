from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tinkercrack.classical import register_all
from tinkercrack.core.config import CrackConfig, load_config
from tinkercrack.core.errors import InvalidInput, RecoveryError
from tinkercrack.core.features import analyze_text, ioc_scan
from tinkercrack.core.registry import crack_known, decrypt_known, encrypt_known, list_plugins

app = typer.Typer(help="Tinker cipher tools: keyed encrypt/decrypt + ciphertext-only key recovery.")

_FILE_OPTION = typer.Option(
    None,
    "--file",
    "-f",
    exists=True,
    dir_okay=False,
    readable=True,
    help="Read input bytes from this file instead of TEXT.",
)
_OUT_OPTION = typer.Option(None, "--out", "-o", help="Write output bytes to this file instead of stdout.")
_CIPHER_OPTION = typer.Option(..., "--cipher", "-c", help="Cipher plugin name (integer or string).")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def _init(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every tried key length."),
    config: Optional[Path] = typer.Option(None, "--config", help="TOML file with a [tinkercrack] table."),
):
    # Register plugins exactly once per CLI run
    register_all()
    _setup_logging(verbose)
    try:
        ctx.obj = load_config(config)
    except InvalidInput as e:
        raise typer.BadParameter(str(e), param_hint="--config")


def _read_input(text: Optional[str], file: Optional[Path]) -> bytes:
    if file is not None:
        return file.read_bytes()
    if text is None:
        raise typer.BadParameter("Provide TEXT or --file.")
    return text.encode("utf-8")


def _emit(data: bytes, out: Optional[Path]) -> None:
    if out is not None:
        out.write_bytes(data)
        return
    typer.echo(data.decode("ascii"))


@app.command()
def plugins():
    """List all registered cipher plugins."""
    for name in list_plugins():
        typer.echo(name)


@app.command()
def analyze(
    text: Optional[str] = typer.Argument(None),
    file: Optional[Path] = _FILE_OPTION,
    iocmax: int = typer.Option(0, help="If >0, show IoC scan up to this key length."),
):
    """Print letter statistics of a text."""
    data = _read_input(text, file)
    try:
        info = analyze_text(data)
    except InvalidInput as e:
        raise typer.BadParameter(str(e))
    for k, v in info.items():
        typer.echo(f"{k}: {v}")

    if iocmax > 0:
        typer.echo("\nTop IoC candidates:")
        for klen, val in ioc_scan(data, max_len=iocmax)[:10]:
            typer.echo(f"  k={klen:2d}  avg_ioc={val:.5f}")


@app.command()
def encrypt(
    cipher: str = _CIPHER_OPTION,
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key material for the cipher."),
    text: Optional[str] = typer.Argument(None, help="Plaintext to encrypt."),
    file: Optional[Path] = _FILE_OPTION,
    out: Optional[Path] = _OUT_OPTION,
):
    """Encrypt with a known key."""
    try:
        ct = encrypt_known(cipher, _read_input(text, file), key)
    except InvalidInput as e:
        raise typer.BadParameter(str(e))
    _emit(ct, out)


@app.command()
def decrypt(
    cipher: str = _CIPHER_OPTION,
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key material for the cipher."),
    text: Optional[str] = typer.Argument(None, help="Ciphertext to decrypt."),
    file: Optional[Path] = _FILE_OPTION,
    out: Optional[Path] = _OUT_OPTION,
):
    """Decrypt when you already know the cipher type and have the key."""
    try:
        pt = decrypt_known(cipher, _read_input(text, file), key)
    except InvalidInput as e:
        raise typer.BadParameter(str(e))
    _emit(pt, out)


@app.command()
def crack(
    ctx: typer.Context,
    cipher: str = _CIPHER_OPTION,
    text: Optional[str] = typer.Argument(None, help="Ciphertext to attack."),
    file: Optional[Path] = _FILE_OPTION,
    length: Optional[int] = typer.Option(None, "--length", "-n", help="Known key length (string cipher)."),
    show_text: bool = typer.Option(True, "--text/--no-text", help="Also print the decrypted text."),
):
    """Recover the key from ciphertext alone."""
    config: CrackConfig = ctx.obj
    try:
        cand = crack_known(cipher, _read_input(text, file), config=config, key_length=length)
    except InvalidInput as e:
        raise typer.BadParameter(str(e))
    except RecoveryError as e:
        typer.secho(f"No key recovered: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(f"cipher={cipher.lower().strip()}  key={cand.key}  score={cand.score:.3f}")
    if show_text:
        typer.echo("-" * 60)
        typer.echo(cand.text.decode("ascii"))


def main():
    app()


if __name__ == "__main__":
    main()
