import logging
import requests
from requests.utils import quote
from django.conf import settings


logger = logging.getLogger(__name__)


class AlmaConfigError(Exception):
    pass


def _base_url():
    if not settings.ALMA_API_URL or not settings.ALMA_API_KEY:
        # Configuration missing; surface a clear error for callers
        logger.error("Alma API not fully configured (url/key)")
        raise AlmaConfigError("Alma API url and key are not configured")
    return f"{settings.ALMA_API_URL.rstrip('/')}/almaws/v1/"


def _headers():
    return {
        "Authorization": f"apikey {settings.ALMA_API_KEY}",
        "Accept": "application/json",
    }


def alma_get(path, params=None):
    url = f"{_base_url()}{path.lstrip('/')}"
    query = {"format": "json", **(params or {})}
    try:
        r = requests.get(
            url,
            headers=_headers(),
            params=query,
            timeout=settings.ALMA_API_TIMEOUT,
        )
        r.raise_for_status()
        return r.json()
    except requests.HTTPError as e:
        resp = getattr(e, "response", None)
        body = resp.text if resp is not None else ""
        logger.error(
            "Alma GET %s failed: %s %s", url, getattr(resp, "status_code", ""), body[:500]
        )
        raise


def get_user(primary_id: str):
    return alma_get(f"users/{quote(primary_id, safe='')}")


def get_user_fees(primary_id: str, status: str = "ACTIVE"):
    """Fees Alma reports for a patron; an empty list when there are none."""
    res = alma_get(f"users/{quote(primary_id, safe='')}/fees", params={"status": status})
    if not res:
        return []
    return res.get("fee") or []


def get_univ_id_from_alma_user(alma_user):
    if not alma_user:
        return None
    id_type = settings.ALMA_UNIV_ID_TYPE
    for ident in alma_user.get("user_identifier") or []:
        kind = ident.get("id_type") or {}
        if kind.get("value") == id_type:
            return ident.get("value")
    return None
