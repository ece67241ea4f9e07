import os

# Telemetry reads its configuration at import time.
os.environ.setdefault("UPCASE_ENGINE_DISABLE_CONSOLE", "1")
