from .config import DEFAULT_CONFIG, CrackConfig, load_config
from .errors import CrackError, InvalidInput, KeyLengthUnresolved, NoCandidateAboveThreshold, RecoveryError
from .features import analyze_text, estimate_key_lengths, ioc_scan
from .registry import crack_known, decrypt_known, encrypt_known, list_plugins, register_plugin
from .results import Candidate, TextFeatures
from .scoring import ENGLISH_FREQ, score
from .verify import accept

__all__ = [
    "DEFAULT_CONFIG",
    "CrackConfig",
    "load_config",
    "CrackError",
    "InvalidInput",
    "KeyLengthUnresolved",
    "NoCandidateAboveThreshold",
    "RecoveryError",
    "analyze_text",
    "estimate_key_lengths",
    "ioc_scan",
    "crack_known",
    "decrypt_known",
    "encrypt_known",
    "list_plugins",
    "register_plugin",
    "Candidate",
    "TextFeatures",
    "ENGLISH_FREQ",
    "score",
    "accept",
]
