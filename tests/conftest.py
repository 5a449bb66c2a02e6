import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

# Ensure default configuration for tests
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("REDIRECT_ENABLED", "true")
os.environ.setdefault("REDIRECT_TO", "https")
