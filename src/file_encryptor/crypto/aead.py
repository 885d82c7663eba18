import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from file_encryptor.crypto.kdf import derive_key
from file_encryptor.utils.dataModels import KEY_LEN, NONCE_LEN
from file_encryptor.utils.errors import AuthenticationFailure, InvalidInput


class AeadCipher:
    """AES-256-GCM bound to one derived key.

    Output of :meth:`encrypt` is ``nonce(12) || ciphertext || tag(16)``; the
    nonce is drawn fresh from the OS RNG on every call, so one instance can
    safely encrypt any number of files.
    """

    __slots__ = ("_aesgcm",)

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_LEN:
            raise InvalidInput(f"Key must be {KEY_LEN} bytes, got {len(key)}")
        object.__setattr__(self, "_aesgcm", AESGCM(bytes(key)))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} AES-256-GCM>"

    @classmethod
    def from_password(cls, password: str | bytes, salt: bytes) -> "AeadCipher":
        return cls(derive_key(password, salt))

    def encrypt(self, plaintext: bytes) -> bytes:
        nonce = os.urandom(NONCE_LEN)
        ct = self._aesgcm.encrypt(nonce, plaintext, None)
        return nonce + ct

    def decrypt(self, data: bytes) -> bytes:
        if len(data) < NONCE_LEN:
            raise InvalidInput("Invalid ciphertext: too short")
        nonce, ct = data[:NONCE_LEN], data[NONCE_LEN:]
        try:
            return self._aesgcm.decrypt(nonce, ct, None)
        except InvalidTag as e:
            raise AuthenticationFailure() from e
