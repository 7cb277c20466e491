import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    FRIENDS_FILE: str = os.getenv("FRIENDS_FILE", "friends.toml")
    FRIENDS_FOOTER_FILE: str = os.getenv("FRIENDS_FOOTER_FILE", "footer.html")
    FRIENDS_OUTPUT_FILE: str = os.getenv("FRIENDS_OUTPUT_FILE", "dist/friends.html")
    CHECK_TIMEOUT_MS: int = int(os.getenv("CHECK_TIMEOUT_MS", 10000))
    CHECK_BATCH_SIZE: int = int(os.getenv("CHECK_BATCH_SIZE", 5))
    CHECK_USER_AGENT: str = os.getenv(
        "CHECK_USER_AGENT", "Mozilla/5.0 (compatible; FriendsHealthCheck/1.0)"
    )
    DEPLOY_REMOTE_PATH: str = os.getenv("DEPLOY_REMOTE_PATH")
    DEPLOY_CACHE_URL: str = os.getenv("DEPLOY_CACHE_URL")
    DEPLOY_TIMEOUT_SECONDS: float = float(os.getenv("DEPLOY_TIMEOUT_SECONDS", "10"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
