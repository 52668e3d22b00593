"""Secret-key implementation of ApiAuthHeader."""

from typing import Dict

from mono_sdk.core.config import Settings
from mono_sdk.domain.exceptions import ConstructionException
from mono_sdk.domain.interfaces import ApiAuthHeader

SECRET_KEY_HEADER = "mono-sec-key"


class SecretKeyAuthHeader(ApiAuthHeader):
    """Sends the configured secret key in the ``mono-sec-key`` header."""

    def __init__(self, config: Settings):
        if config is None:
            raise ConstructionException("config")
        if not config.secret_key or not config.secret_key.strip():
            raise ConstructionException("secret_key", "must not be blank")
        self._secret_key = config.secret_key

    def headers(self) -> Dict[str, str]:
        return {SECRET_KEY_HEADER: self._secret_key}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(secret_key='***')"
