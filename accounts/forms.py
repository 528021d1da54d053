from django import forms
from django.contrib.auth import password_validation


class CredentialsForm(forms.Form):
    email = forms.EmailField(error_messages={'invalid': 'Invalid email'})
    password = forms.CharField(
        min_length=8,
        strip=False,
        error_messages={'min_length': 'Password must be at least 8 characters'},
    )

    def clean_email(self):
        return self.cleaned_data['email'].strip().lower()


class RegisterForm(CredentialsForm):

    def clean_password(self):
        password = self.cleaned_data['password']
        password_validation.validate_password(password)
        return password


class ForgotPasswordForm(forms.Form):
    email = forms.EmailField(error_messages={'invalid': 'Enter a valid email'})

    def clean_email(self):
        return self.cleaned_data['email'].strip().lower()


class ResetPasswordForm(forms.Form):
    uid = forms.CharField(error_messages={'required': 'Token is required'})
    token = forms.CharField(error_messages={'required': 'Token is required'})
    new_password = forms.CharField(
        min_length=8,
        strip=False,
        error_messages={'min_length': 'Password must be at least 8 characters'},
    )
