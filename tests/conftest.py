import os

# ApplicationConfig reads the environment once at import time
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("DB_URI", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES", "false")
