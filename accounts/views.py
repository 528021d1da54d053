import logging

from django.contrib.auth import authenticate, get_user_model, login, logout, password_validation
from django.contrib.auth.tokens import default_token_generator
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.http import HttpResponse, JsonResponse
from django.middleware.csrf import get_token
from django.utils.encoding import force_bytes, force_str
from django.utils.http import urlsafe_base64_decode, urlsafe_base64_encode
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from .emails import send_admin_signup_email, send_password_reset_email
from .forms import CredentialsForm, ForgotPasswordForm, RegisterForm, ResetPasswordForm
from .utils import form_error, json_error, read_json

logger = logging.getLogger(__name__)

User = get_user_model()

GENERIC_RESET_MESSAGE = 'If an account exists for that email, a reset link has been sent.'


@require_POST
def register(request):
    try:
        form = RegisterForm(read_json(request))
    except ValueError:
        return json_error('Invalid JSON body.')
    if not form.is_valid():
        return form_error(form)

    email = form.cleaned_data['email']
    if User.objects.filter(email=email).exists():
        return json_error('Email already in use', status=409)
    try:
        user = User.objects.create_user(email=email, password=form.cleaned_data['password'])
    except IntegrityError:
        return json_error('Email already in use', status=409)

    # login() rotates the session key
    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    logger.info("Registered new user %s", user.pk)

    send_admin_signup_email(user.email)

    return JsonResponse({'user': user.to_safe_dict(), 'csrf_token': get_token(request)}, status=201)


@require_POST
def login_view(request):
    try:
        form = CredentialsForm(read_json(request))
    except ValueError:
        return json_error('Invalid JSON body.')
    if not form.is_valid():
        return form_error(form)

    user = authenticate(
        request,
        email=form.cleaned_data['email'],
        password=form.cleaned_data['password'],
    )
    if user is None:
        logger.info("Failed login for %s", form.cleaned_data['email'])
        return json_error('Invalid email or password', status=401)

    login(request, user)
    # login() rotated the CSRF token
    return JsonResponse({'user': user.to_safe_dict(), 'csrf_token': get_token(request)})


@require_POST
def logout_view(request):
    logout(request)
    return HttpResponse(status=204)


@require_GET
@ensure_csrf_cookie
def me(request):
    """Current user, plus the CSRF token a cross-origin client can't read from the cookie."""
    if not request.user.is_authenticated:
        # Session may still point at a deleted account
        request.session.flush()
        return json_error('Unauthorized', status=401, csrf_token=get_token(request))
    return JsonResponse({'user': request.user.to_safe_dict(), 'csrf_token': get_token(request)})


@require_POST
def forgot_password(request):
    """Email a reset link if the account exists. The answer never reveals which."""
    try:
        form = ForgotPasswordForm(read_json(request))
    except ValueError:
        return json_error('Invalid JSON body.')
    if not form.is_valid():
        return form_error(form)

    email = form.cleaned_data['email']
    user = User.objects.filter(email=email, is_active=True).first()
    if user is None:
        logger.info("Password reset requested for unknown email")
        return JsonResponse({'message': GENERIC_RESET_MESSAGE})

    uid = urlsafe_base64_encode(force_bytes(user.pk))
    token = default_token_generator.make_token(user)
    try:
        send_password_reset_email(user.email, uid, token)
    except Exception:
        logger.exception("Failed to send password reset email to user %s", user.pk)

    return JsonResponse({'message': GENERIC_RESET_MESSAGE})


@require_POST
def reset_password(request):
    """Set a new password from a reset link. Tokens die once the password changes."""
    try:
        form = ResetPasswordForm(read_json(request))
    except ValueError:
        return json_error('Invalid JSON body.')
    if not form.is_valid():
        return form_error(form)

    try:
        user_id = force_str(urlsafe_base64_decode(form.cleaned_data['uid']))
        user = User.objects.get(pk=user_id)
    except (TypeError, ValueError, OverflowError, ValidationError, User.DoesNotExist):
        user = None

    if user is None or not default_token_generator.check_token(user, form.cleaned_data['token']):
        return json_error('Invalid or expired reset token')

    new_password = form.cleaned_data['new_password']
    try:
        password_validation.validate_password(new_password, user)
    except ValidationError as e:
        return json_error('Invalid request', errors={'new_password': e.messages})

    user.set_password(new_password)
    user.save(update_fields=['password'])
    logger.info("Password reset for user %s", user.pk)

    return JsonResponse({'message': 'Password reset successful'})
