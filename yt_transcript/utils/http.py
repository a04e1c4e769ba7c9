import requests
from typing import Optional
from yt_transcript.config import settings
from yt_transcript.core.errors import NetworkError
from yt_transcript.models.request import RetrievalConfig

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)"
)

def proxy_map(proxy: Optional[str]) -> dict:
    if not proxy:
        return {}
    return {"http": proxy, "https": proxy}

def build_session(config: Optional[RetrievalConfig] = None) -> requests.Session:
    """One session per retrieval: headers and proxy never leak between calls."""
    config = config or RetrievalConfig()
    session = requests.Session()
    session.trust_env = False
    session.headers.update({"User-Agent": USER_AGENT})
    if config.language:
        session.headers["Accept-Language"] = config.language
    session.proxies.update(proxy_map(config.proxy))
    return session

def http_get(session: requests.Session, url: str) -> requests.Response:
    try:
        return session.get(url, timeout=settings.REQUEST_TIMEOUT)
    except requests.exceptions.RequestException as e:
        raise NetworkError(str(e), url=url) from e
