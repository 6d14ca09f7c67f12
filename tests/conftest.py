import os


os.environ.setdefault("NORMALIZER_ENV", "testing")
os.environ.setdefault("LOG_LEVEL", "INFO")
