import json

from django.http import JsonResponse


def read_json(request):
    """Decode a JSON object body. An empty body reads as ``{}``."""
    if not request.body:
        return {}
    data = json.loads(request.body)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object.')
    return data


def json_error(message, status=400, **extra):
    return JsonResponse({'status': 'error', 'message': message, **extra}, status=status)


def form_error(form, message='Invalid request'):
    return json_error(message, status=400, errors=form.errors.get_json_data())
