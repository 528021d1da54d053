from unittest import mock
from urllib.parse import parse_qs, urlparse

from django.contrib.auth import get_user_model
from django.contrib.auth.tokens import default_token_generator
from django.core import mail
from django.test import TestCase, override_settings
from django.utils.encoding import force_bytes
from django.utils.http import urlsafe_base64_encode

from accounts.views import GENERIC_RESET_MESSAGE

User = get_user_model()


@override_settings(CLIENT_URL='https://app.example.com/')
class ForgotPasswordTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(email='lifter@example.com', password='supersecret')

    def post(self, data):
        return self.client.post('/api/auth/forgot-password', data, content_type='application/json')

    def test_known_email_gets_reset_link(self):
        response = self.post({'email': 'Lifter@Example.com'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], GENERIC_RESET_MESSAGE)
        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.to, ['lifter@example.com'])
        self.assertEqual(message.subject, 'Reset Your Password')
        self.assertIn('https://app.example.com/reset-password?uid=', message.body)
        html, mimetype = message.alternatives[0]
        self.assertEqual(mimetype, 'text/html')
        self.assertIn('Reset Password', html)

    def test_unknown_email_gets_same_answer_and_no_mail(self):
        response = self.post({'email': 'ghost@example.com'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], GENERIC_RESET_MESSAGE)
        self.assertEqual(len(mail.outbox), 0)

    def test_invalid_email_is_rejected(self):
        self.assertEqual(self.post({'email': 'nope'}).status_code, 400)

    def test_send_failure_is_not_exposed(self):
        with mock.patch('accounts.views.send_password_reset_email', side_effect=OSError('smtp down')):
            response = self.post({'email': 'lifter@example.com'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], GENERIC_RESET_MESSAGE)


class ResetPasswordTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(email='lifter@example.com', password='supersecret')
        self.uid = urlsafe_base64_encode(force_bytes(self.user.pk))
        self.token = default_token_generator.make_token(self.user)

    def post(self, data):
        return self.client.post('/api/auth/reset-password', data, content_type='application/json')

    def test_reset_with_valid_token(self):
        response = self.post({'uid': self.uid, 'token': self.token, 'new_password': 'brandnewpass'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], 'Password reset successful')
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('brandnewpass'))

    def test_token_is_single_use(self):
        self.post({'uid': self.uid, 'token': self.token, 'new_password': 'brandnewpass'})

        response = self.post({'uid': self.uid, 'token': self.token, 'new_password': 'anotherpass1'})

        self.assertEqual(response.status_code, 400)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('brandnewpass'))

    def test_bad_token(self):
        response = self.post({'uid': self.uid, 'token': 'abc-123', 'new_password': 'brandnewpass'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Invalid or expired reset token')

    def test_garbage_uid(self):
        response = self.post({'uid': '!!!', 'token': self.token, 'new_password': 'brandnewpass'})
        self.assertEqual(response.status_code, 400)

    def test_short_password(self):
        response = self.post({'uid': self.uid, 'token': self.token, 'new_password': 'short'})

        self.assertEqual(response.status_code, 400)
        self.assertIn('new_password', response.json()['errors'])

    @override_settings(PASSWORD_RESET_TIMEOUT=-1)
    def test_expired_token(self):
        response = self.post({'uid': self.uid, 'token': self.token, 'new_password': 'brandnewpass'})
        self.assertEqual(response.status_code, 400)

    @override_settings(CLIENT_URL='https://app.example.com')
    def test_emailed_link_round_trips(self):
        self.client.post(
            '/api/auth/forgot-password', {'email': 'lifter@example.com'}, content_type='application/json',
        )
        link = next(line for line in mail.outbox[0].body.splitlines() if line.startswith('https://'))
        query = parse_qs(urlparse(link).query)

        response = self.post({
            'uid': query['uid'][0],
            'token': query['token'][0],
            'new_password': 'brandnewpass',
        })

        self.assertEqual(response.status_code, 200)
