"""Shared test configuration."""

import os

# Keep tests away from real credentials and a developer's .env
os.environ.setdefault("API_USERNAME", "test-user")
os.environ.setdefault("API_PASSWORD", "test-password")
os.environ.setdefault("TUBOLETO_AUTH_URL", "https://tuboleto.test/auth/user/login")
os.environ.setdefault("TUBOLETO_API_URL", "https://tuboleto.test/recaudador/venta/getConsultaCupos")
