import os
import tempfile

from hypothesis import HealthCheck, settings

# Loggers attach their file handlers at import time, so redirect them before
# any hilbmap module is imported by the tests.
os.environ.setdefault("HILBMAP_LOG_DIR", tempfile.mkdtemp(prefix="hilbmap-test-logs-"))

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")
