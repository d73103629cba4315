# src/resource_resolver/config.py
import logging
from typing import Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, FilePath, PositiveFloat

from .base import Resolver
from .http import default_client, with_close, with_headers, with_timeout
from .resolvers import (
    BytesResolver,
    FileResolver,
    HttpResolver,
    StringResolver,
    standard_b64decode,
    urlsafe_b64decode,
)
from .scheme import (
    BYTES_SCHEME,
    FILE_SCHEME,
    HTTP_SCHEME,
    HTTPS_SCHEME,
    STRING_SCHEME,
    Resolvers,
    SchemeResolver,
)
from .template import TemplateResolver
from .transport import build_session_with_p12

logger = logging.getLogger("resource-resolver.config")

BuiltinScheme = Literal["string", "bytes", "file", "http", "https"]


class FileConfig(BaseModel):
    # logical root for file resources; empty means paths are taken as given
    root: str = ""


class BytesConfig(BaseModel):
    encoding: Literal["standard", "urlsafe"] = "standard"


class CertConfig(BaseModel):
    p12_path: FilePath
    p12_password: str = ""


class HttpConfig(BaseModel):
    open_method: str = "GET"
    timeout_seconds: Optional[PositiveFloat] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    close: bool = False
    cert: Optional[CertConfig] = None


class TemplateConfig(BaseModel):
    enabled: bool = True
    data: dict = Field(default_factory=dict)


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_mode: bool = False


class ResolverConfig(BaseModel):
    file: FileConfig = FileConfig()
    bytes: BytesConfig = BytesConfig()
    http: HttpConfig = HttpConfig()
    template: TemplateConfig = TemplateConfig()
    # what to do with strings that carry no scheme
    no_scheme: Literal["file", "string", "bytes", "none"] = "file"
    # extra scheme names mapped onto a built-in one, e.g. {"text": "string"}
    aliases: Dict[str, BuiltinScheme] = Field(default_factory=dict)
    logging: LoggingConfig = LoggingConfig()


def load_config(path: str) -> ResolverConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return ResolverConfig.model_validate(raw)


def build_http_client(cfg: HttpConfig):
    if cfg.cert:
        client = build_session_with_p12(str(cfg.cert.p12_path), cfg.cert.p12_password)
    else:
        client = default_client()

    client = with_headers(cfg.headers, client)
    if cfg.close:
        client = with_close(client)
    if cfg.timeout_seconds:
        client = with_timeout(cfg.timeout_seconds, client)
    return client


def build_resolver(cfg: ResolverConfig) -> Resolver:
    """
    Assemble a resolver from configuration. The shape matches the default one:
    optional template expansion in front of a scheme dispatcher.
    """
    decoder = urlsafe_b64decode if cfg.bytes.encoding == "urlsafe" else standard_b64decode
    fr = FileResolver(root=cfg.file.root)
    hr = HttpResolver(open_method=cfg.http.open_method, client=build_http_client(cfg.http))

    builtins: Dict[str, Resolver] = {
        STRING_SCHEME: StringResolver(),
        BYTES_SCHEME: BytesResolver(decoder),
        FILE_SCHEME: fr,
        HTTP_SCHEME: hr,
        HTTPS_SCHEME: hr,
    }

    resolvers = Resolvers(builtins)
    for alias, target in cfg.aliases.items():
        logger.debug(f"Registering scheme alias {alias} -> {target}")
        resolvers.set(alias, builtins[target])

    no_scheme = None if cfg.no_scheme == "none" else builtins[cfg.no_scheme]
    resolver: Resolver = SchemeResolver(resolvers=resolvers, no_scheme=no_scheme)

    if cfg.template.enabled:
        resolver = TemplateResolver(resolver, data=cfg.template.data)

    logger.debug(
        f"Built resolver: schemes={sorted(resolvers)} no_scheme={cfg.no_scheme} "
        f"template={cfg.template.enabled}"
    )
    return resolver
