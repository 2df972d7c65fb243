"""
Authentication event logging on the 'security' logger.
"""
import logging

logger = logging.getLogger('security')


def get_client_ip(request):
    """
    Extract client IP address from request, checking proxy headers.
    """
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        # First entry is the client, the rest are proxies
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR') or 'unknown'


def log_login_attempt(request, email, success):
    user_agent = request.META.get('HTTP_USER_AGENT', '')
    logger.info(
        f"Login attempt: email={email} success={success} "
        f"ip={get_client_ip(request)} user_agent={user_agent!r}"
    )


def log_token_refresh(request, user_id):
    logger.info(f"Token refresh: user_id={user_id} ip={get_client_ip(request)}")


def log_unauthorized_access(request):
    logger.warning(
        f"Unauthorized access: ip={get_client_ip(request)} "
        f"path={request.get_full_path()} method={request.method}"
    )
