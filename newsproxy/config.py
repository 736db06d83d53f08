from dataclasses import dataclass
import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from .auth import Identity, parse_identities

DEFAULT_USERS = "Norman:guest,Bartek:user,Inga:moderator,Dawid:admin"

@dataclass
class Config:
    log_path: str
    log_console: bool
    users: List[Identity]

def load_config(environ: Optional[Mapping[str, str]] = None):
    if environ is None:
        load_dotenv(override=True)
        environ = os.environ
    return Config(
        log_path=environ.get("NEWS_LOG_PATH", "news_proxy.log"),
        log_console=environ.get("NEWS_LOG_CONSOLE", "false").lower() == "true",
        users=parse_identities(environ.get("NEWS_USERS", DEFAULT_USERS)),
    )
