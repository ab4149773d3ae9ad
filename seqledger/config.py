# seqledger/config.py
import os
from dataclasses import dataclass
from typing import Optional

from seqledger import __version__
from seqledger.exceptions import ConfigurationError

DEFAULT_URL = "https://api.seq.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings shared by every request a Client makes."""
    url: str
    ledger: str
    credential: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = f"seqledger-python/{__version__}"

    @property
    def base_url(self) -> str:
        return f"{self.url.rstrip('/')}/{self.ledger}"

    @classmethod
    def resolve(
        cls,
        url: Optional[str] = None,
        ledger: Optional[str] = None,
        credential: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "ClientConfig":
        """Resolve settings in this order:
        1. explicit arguments
        2. SEQLEDGER_URL / SEQLEDGER_LEDGER / SEQLEDGER_CREDENTIAL / SEQLEDGER_TIMEOUT
        3. defaults (ledger name has none)
        """
        url = url or os.environ.get("SEQLEDGER_URL") or DEFAULT_URL
        ledger = ledger or os.environ.get("SEQLEDGER_LEDGER")
        credential = credential or os.environ.get("SEQLEDGER_CREDENTIAL")

        if timeout is None:
            env_timeout = os.environ.get("SEQLEDGER_TIMEOUT")
            if env_timeout:
                try:
                    timeout = float(env_timeout)
                except ValueError:
                    raise ConfigurationError(f"SEQLEDGER_TIMEOUT is not a number: {env_timeout!r}")
            else:
                timeout = DEFAULT_TIMEOUT

        if not ledger:
            raise ConfigurationError(
                "No ledger name configured (pass ledger= or set SEQLEDGER_LEDGER)"
            )
        if not url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Ledger URL must be http(s): {url!r}")

        return cls(url=url, ledger=ledger, credential=credential, timeout=timeout)
