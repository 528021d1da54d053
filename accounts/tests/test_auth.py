from django.contrib.auth import SESSION_KEY, get_user_model
from django.core import mail
from django.test import Client, TestCase, override_settings

User = get_user_model()


class RegisterTests(TestCase):

    def post(self, data):
        return self.client.post('/api/auth/register', data, content_type='application/json')

    def test_register_creates_user_and_logs_in(self):
        response = self.post({'email': '  Lifter@Example.COM ', 'password': 'supersecret'})

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body['user']['email'], 'lifter@example.com')
        self.assertNotIn('password', body['user'])
        user = User.objects.get(email='lifter@example.com')
        self.assertEqual(self.client.session[SESSION_KEY], str(user.pk))

        me = self.client.get('/api/auth/me')
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()['user']['id'], str(user.pk))

    def test_register_rejects_short_password(self):
        response = self.post({'email': 'a@example.com', 'password': 'short'})

        self.assertEqual(response.status_code, 400)
        self.assertIn('password', response.json()['errors'])
        self.assertFalse(User.objects.exists())

    def test_register_rejects_invalid_email(self):
        response = self.post({'email': 'not-an-email', 'password': 'supersecret'})
        self.assertEqual(response.status_code, 400)
        self.assertIn('email', response.json()['errors'])

    def test_duplicate_email_conflicts(self):
        User.objects.create_user(email='taken@example.com', password='supersecret')

        response = self.post({'email': 'TAKEN@example.com', 'password': 'anothersecret'})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()['message'], 'Email already in use')

    @override_settings(ADMIN_SIGNUP_EMAIL='admin@example.com')
    def test_admin_is_notified_of_signup(self):
        self.post({'email': 'new@example.com', 'password': 'supersecret'})

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ['admin@example.com'])
        self.assertIn('new@example.com', mail.outbox[0].body)

    def test_no_admin_email_configured_sends_nothing(self):
        with self.settings(ADMIN_SIGNUP_EMAIL=''):
            self.post({'email': 'new@example.com', 'password': 'supersecret'})
        self.assertEqual(len(mail.outbox), 0)


class LoginTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(email='lifter@example.com', password='supersecret')

    def post(self, data):
        return self.client.post('/api/auth/login', data, content_type='application/json')

    def test_login_with_valid_credentials(self):
        response = self.post({'email': 'Lifter@example.com', 'password': 'supersecret'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['user']['email'], 'lifter@example.com')
        self.assertEqual(self.client.session[SESSION_KEY], str(self.user.pk))

    def test_wrong_password(self):
        response = self.post({'email': 'lifter@example.com', 'password': 'wrongpassword'})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'Invalid email or password')

    def test_unknown_email(self):
        response = self.post({'email': 'nobody@example.com', 'password': 'supersecret'})
        self.assertEqual(response.status_code, 401)

    def test_malformed_json(self):
        response = self.client.post('/api/auth/login', '{nope', content_type='application/json')
        self.assertEqual(response.status_code, 400)

    def test_login_requires_post(self):
        self.assertEqual(self.client.get('/api/auth/login').status_code, 405)

    def test_logout_clears_session(self):
        self.client.force_login(self.user)

        response = self.client.post('/api/auth/logout')

        self.assertEqual(response.status_code, 204)
        self.assertNotIn(SESSION_KEY, self.client.session)
        self.assertEqual(self.client.get('/api/auth/me').status_code, 401)


class SessionGateTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(email='lifter@example.com', password='supersecret')

    def test_anonymous_request_is_rejected(self):
        response = self.client.get('/api/workouts')

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'Unauthorized')

    def test_corrupt_session_user_is_flushed(self):
        session = self.client.session
        session[SESSION_KEY] = 'dev'
        session.save()

        response = self.client.get('/api/workouts')

        self.assertEqual(response.status_code, 401)
        self.assertNotIn(SESSION_KEY, self.client.session)

    def test_deleted_user_is_unauthorized(self):
        self.client.force_login(self.user)
        self.user.delete()

        self.assertEqual(self.client.get('/api/workouts').status_code, 401)
        self.assertEqual(self.client.get('/api/auth/me').status_code, 401)

    def test_me_sets_csrf_cookie(self):
        self.client.force_login(self.user)
        response = self.client.get('/api/auth/me')
        self.assertIn('csrftoken', response.cookies)

    def test_health_needs_no_session(self):
        response = self.client.get('/health')
        self.assertEqual(response.json(), {'status': 'ok'})


class CorruptSessionTests(TestCase):
    """A session whose user id isn't a UUID must never reach the user lookup."""

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(email='lifter@example.com', password='supersecret')

    def setUp(self):
        session = self.client.session
        session[SESSION_KEY] = 'dev'
        session.save()

    def test_me_flushes_and_rejects(self):
        response = self.client.get('/api/auth/me')

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'Unauthorized')
        self.assertNotIn(SESSION_KEY, self.client.session)

    def test_login_replaces_the_session(self):
        response = self.client.post(
            '/api/auth/login',
            {'email': 'lifter@example.com', 'password': 'supersecret'},
            content_type='application/json',
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.session[SESSION_KEY], str(self.user.pk))

    def test_logout(self):
        self.assertEqual(self.client.post('/api/auth/logout').status_code, 204)


@override_settings(CORS_ALLOWED_ORIGINS=['https://app.example.com'])
class CrossOriginTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(email='lifter@example.com', password='supersecret')

    def test_client_origin_gets_credentialed_cors_headers(self):
        response = self.client.get('/health', HTTP_ORIGIN='https://app.example.com')

        self.assertEqual(response['Access-Control-Allow-Origin'], 'https://app.example.com')
        self.assertEqual(response['Access-Control-Allow-Credentials'], 'true')

    def test_other_origins_get_no_cors_headers(self):
        response = self.client.get('/health', HTTP_ORIGIN='https://evil.example.com')
        self.assertNotIn('Access-Control-Allow-Origin', response)

    def test_csrf_token_from_me_body_authorizes_login(self):
        client = Client(enforce_csrf_checks=True)
        credentials = {'email': 'lifter@example.com', 'password': 'supersecret'}

        rejected = client.post('/api/auth/login', credentials, content_type='application/json')
        self.assertEqual(rejected.status_code, 403)

        token = client.get('/api/auth/me').json()['csrf_token']
        response = client.post(
            '/api/auth/login', credentials, content_type='application/json', HTTP_X_CSRFTOKEN=token,
        )

        self.assertEqual(response.status_code, 200)
        self.assertIn('csrf_token', response.json())
