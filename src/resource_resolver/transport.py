# src/resource_resolver/transport.py
"""requests sessions that present a PKCS#12 client certificate, for HTTP resources behind mutual TLS."""
import logging
import os
import ssl
import tempfile

import requests
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat
from cryptography.hazmat.primitives.serialization.pkcs12 import load_key_and_certificates
from requests.adapters import HTTPAdapter
from urllib3 import PoolManager

logger = logging.getLogger("resource-resolver.transport")


def load_p12_as_pem(p12_path: str, p12_password: str):
    """Return (cert_chain_pem, key_pem) from a .p12/.pfx bundle."""
    with open(p12_path, "rb") as f:
        key, cert, chain = load_key_and_certificates(f.read(), p12_password.encode() if p12_password else None)
    if key is None or cert is None:
        raise ValueError(f"{p12_path} does not contain both a private key and a certificate")
    pem_key = key.private_bytes(Encoding.PEM, PrivateFormat.TraditionalOpenSSL, NoEncryption())
    pem_cert = cert.public_bytes(Encoding.PEM)
    pem_chain = b"".join(c.public_bytes(Encoding.PEM) for c in (chain or []))
    return pem_cert + pem_chain, pem_key


class P12HttpAdapter(HTTPAdapter):
    def __init__(self, p12_path: str, p12_password: str, **kwargs):
        self.p12_path = p12_path
        self.p12_password = p12_password
        super().__init__(**kwargs)

    def _ssl_context(self) -> ssl.SSLContext:
        ctx = ssl.create_default_context(purpose=ssl.Purpose.SERVER_AUTH)
        ctx.minimum_version = ssl.TLSVersion.TLSv1_2
        pem_cert, pem_key = load_p12_as_pem(self.p12_path, self.p12_password)
        # load_cert_chain only takes file names; the key never outlives this call
        with tempfile.TemporaryDirectory() as tmp:
            cert_file = os.path.join(tmp, "cert.pem")
            key_file = os.path.join(tmp, "key.pem")
            with open(cert_file, "wb") as f:
                f.write(pem_cert)
            with open(key_file, "wb") as f:
                f.write(pem_key)
            ctx.load_cert_chain(certfile=cert_file, keyfile=key_file)
        return ctx

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        logger.debug(f"Loading client certificate from {self.p12_path}")
        pool_kwargs["ssl_context"] = self._ssl_context()
        self.poolmanager = PoolManager(num_pools=connections, maxsize=maxsize, block=block, **pool_kwargs)


def build_session_with_p12(p12_path: str, p12_password: str) -> requests.Session:
    s = requests.Session()
    s.mount("https://", P12HttpAdapter(p12_path, p12_password))
    return s
