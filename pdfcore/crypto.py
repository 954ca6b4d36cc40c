"""Ciphers used by the PDF standard security handler."""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK = 16


class Rc4:
    """RC4 stream cipher."""

    def __init__(self, key: bytes) -> None:
        if not key:
            raise ValueError("RC4 key must not be empty")
        state = list(range(256))
        j = 0
        for i in range(256):
            j = (j + state[i] + key[i % len(key)]) & 0xFF
            state[i], state[j] = state[j], state[i]
        self._state = state
        self._i = 0
        self._j = 0

    def apply_keystream(self, data: bytes) -> bytes:
        """XOR the data with the next bytes of the keystream."""
        s = self._state
        out = bytearray(data)
        for pos, byte in enumerate(out):
            self._i = (self._i + 1) & 0xFF
            self._j = (self._j + s[self._i]) & 0xFF
            s[self._i], s[self._j] = s[self._j], s[self._i]
            out[pos] = byte ^ s[(s[self._i] + s[self._j]) & 0xFF]
        return bytes(out)


def rc4_decrypt(key: bytes, data: bytes) -> bytes:
    """Decrypt (or encrypt) data with a fresh RC4 keystream."""
    return Rc4(key).apply_keystream(data)


def _check_key(key: bytes, size: int) -> None:
    if len(key) != size:
        raise ValueError(f"key must be {size} bytes, got {len(key)}")


def _cbc_decrypt_raw(key: bytes, iv: bytes, data: bytes) -> bytes:
    if len(data) % _BLOCK:
        raise ValueError("ciphertext length must be a multiple of 16")
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    return decryptor.update(data) + decryptor.finalize()


def _decrypt_with_prefixed_iv(key: bytes, data: bytes) -> bytes:
    if len(data) < _BLOCK:
        raise ValueError("data is too short to hold an initialisation vector")
    iv, body = data[:_BLOCK], data[_BLOCK:]
    if not body:
        raise ValueError("no ciphertext follows the initialisation vector")
    plain = _cbc_decrypt_raw(key, iv, body)
    unpadder = padding.PKCS7(128).unpadder()
    return unpadder.update(plain) + unpadder.finalize()


def aes128_decrypt(key: bytes, data: bytes) -> bytes:
    """Decrypt IV-prefixed AES-128-CBC data and strip PKCS#7 padding."""
    _check_key(key, 16)
    return _decrypt_with_prefixed_iv(key, data)


def aes256_decrypt(key: bytes, data: bytes) -> bytes:
    """Decrypt IV-prefixed AES-256-CBC data and strip PKCS#7 padding."""
    _check_key(key, 32)
    return _decrypt_with_prefixed_iv(key, data)


def aes_cbc_encrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Encrypt whole blocks with AES-128-CBC, adding no padding."""
    _check_key(key, 16)
    if len(data) % _BLOCK:
        raise ValueError("plaintext length must be a multiple of 16")
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def aes_cbc_decrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Decrypt whole blocks with AES-256-CBC, keeping any padding."""
    _check_key(key, 32)
    return _cbc_decrypt_raw(key, iv, data)