"""工具模块"""

from .canonical import (
    build_sign_message,
    build_request_message,
    build_invocation_message,
    canonical_url,
)
from .nonce import generate_nonce, current_timestamp
from .key_provider import (
    KeyProvider,
    PemKeyProvider,
    FileKeyProvider,
    load_private_key,
    load_public_key,
)
from .rsa_signer import Signer, RSASigner
from .authorization import (
    build_authorization_token,
    build_authorization_header,
    RequestAuthorizer,
)
from .aes_gcm import AesGcmDecryptor

__all__ = [
    "build_sign_message",
    "build_request_message",
    "build_invocation_message",
    "canonical_url",
    "generate_nonce",
    "current_timestamp",
    "KeyProvider",
    "PemKeyProvider",
    "FileKeyProvider",
    "load_private_key",
    "load_public_key",
    "Signer",
    "RSASigner",
    "build_authorization_token",
    "build_authorization_header",
    "RequestAuthorizer",
    "AesGcmDecryptor",
]
