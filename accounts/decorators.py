from functools import wraps

from .utils import json_error


def api_login_required(view_func):
    """Like ``login_required`` but answers JSON 401 instead of redirecting."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return json_error('Unauthorized', status=401)
        return view_func(request, *args, **kwargs)
    return wrapper
