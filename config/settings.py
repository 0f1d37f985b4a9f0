"""Check settings and configuration."""
import logging
import os
import time
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from domain.entities.check import CheckSpec
from domain.errors import ConfigurationInvalid

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)

logger = logging.getLogger(__name__)

# Used when KH_CHECK_RUN_DEADLINE is unavailable.
DEFAULT_CHECK_TIMEOUT: float = 5 * 60.0
# Keeps a small buffer before the Kuberhealthy deadline.
DEADLINE_PADDING: float = 5.0


class Settings:
    """Process level settings that do not change between runs."""

    # ── Kuberhealthy ───────────────────────────────────────────────────────
    KH_REPORTING_URL: str = os.getenv('KH_REPORTING_URL', '')
    KH_RUN_UUID:      str = os.getenv('KH_RUN_UUID', '')
    REPORT_TIMEOUT:   float = float(os.getenv('KH_REPORT_TIMEOUT', '10'))

    # ── Kubernetes API ─────────────────────────────────────────────────────
    KUBE_API_URL:   str = os.getenv('KUBE_API_URL', '')
    KUBE_TOKEN:     str = os.getenv('KUBE_TOKEN', '')
    SERVICE_ACCOUNT_DIR: Path = Path(
        os.getenv('KUBE_SERVICE_ACCOUNT_DIR', '/var/run/secrets/kubernetes.io/serviceaccount')
    )
    KUBE_REQUEST_TIMEOUT: float = float(os.getenv('KUBE_REQUEST_TIMEOUT', '30'))

    # ── Node readiness gate ────────────────────────────────────────────────
    MIN_NODE_AGE:       float = 3 * 60.0
    READINESS_LIMIT:    float = 60.0
    READINESS_INTERVAL: float = 5.0

    # ── Logging ────────────────────────────────────────────────────────────
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR:   Optional[Path] = Path(os.environ['LOG_DIR']) if os.getenv('LOG_DIR') else None

    @classmethod
    def kube_api_url(cls) -> str:
        """API server base URL, from the override or the in-cluster service env."""
        if cls.KUBE_API_URL:
            return cls.KUBE_API_URL.rstrip('/')
        host = os.getenv('KUBERNETES_SERVICE_HOST', '')
        port = os.getenv('KUBERNETES_SERVICE_PORT', '443')
        if not host:
            return ''
        if ':' in host:
            host = f'[{host}]'
        return f'https://{host}:{port}'


def check_timeout(now: Optional[float] = None) -> float:
    """Seconds the check may run: the Kuberhealthy deadline minus padding, or the default."""
    raw = os.getenv('KH_CHECK_RUN_DEADLINE', '')
    if not raw:
        logger.info("There was an issue getting the check deadline: KH_CHECK_RUN_DEADLINE is not set")
        return DEFAULT_CHECK_TIMEOUT
    try:
        deadline = float(raw)
    except ValueError:
        logger.info("There was an issue getting the check deadline: %r is not a unix timestamp", raw)
        return DEFAULT_CHECK_TIMEOUT
    remaining = deadline - ((now if now is not None else time.time()) + DEADLINE_PADDING)
    if remaining > 0:
        return remaining
    return DEFAULT_CHECK_TIMEOUT


def parse_config(now: Optional[float] = None) -> CheckSpec:
    """Load environment variables into a CheckSpec."""
    timeout = check_timeout(now)

    hostname = os.getenv('HOSTNAME', '')
    if not hostname:
        raise ConfigurationInvalid("HOSTNAME environment variable has not been set")

    node_name = os.getenv('NODE_NAME', '')
    if not node_name:
        raise ConfigurationInvalid("failed to retrieve NODE_NAME environment variable")

    return CheckSpec(
        hostname=hostname,
        timeout=timeout,
        namespace=os.getenv('NAMESPACE', ''),
        label_selector=os.getenv('DNS_POD_SELECTOR', ''),
        node_name=node_name,
    )


settings = Settings()
