"""Root conftest — Django settings for tests, no network, logs in a temp dir."""

import os
import tempfile

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "team_site.settings")
os.environ.setdefault("SITE_LOG_ROOT", tempfile.mkdtemp(prefix="team-site-logs-"))
# the probe is switched on per test, never by the environment
os.environ["PLACEHOLDER_PROBE"] = "0"

import django  # noqa: E402
from django.test.utils import setup_test_environment  # noqa: E402

django.setup()
setup_test_environment()
