import requests
from typing import Optional
from yt_transcript.config import settings
from yt_transcript.core.errors import IpCheckError
from yt_transcript.models.request import RetrievalConfig
from yt_transcript.utils.http import build_session, http_get

def check_ip_address(proxy: Optional[str] = None, session: Optional[requests.Session] = None) -> str:
    """Return the outbound IP address as seen by an echo service.

    When ``session`` is given it is used as-is (its proxy wins over ``proxy``);
    otherwise a throwaway session is built for ``proxy``.
    """
    if session is None:
        with build_session(RetrievalConfig(proxy=proxy)) as own_session:
            return _probe(own_session)
    return _probe(session)

def _probe(session: requests.Session) -> str:
    resp = http_get(session, settings.IP_CHECK_URL)
    if not resp.ok:
        raise IpCheckError(resp.reason or str(resp.status_code))
    return resp.text.strip()
