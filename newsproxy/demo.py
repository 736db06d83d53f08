"""
newsproxy.demo
~~~~~~~~~~~~~~
Walk one shared board through every role and print each outcome.
"""

from __future__ import annotations

from typing import Dict, List

from .auth import AuthError, Role
from .config import Config
from .core import NewsServiceProxy
from .logger import ProxyLogger
from .store import NewsStore, Response


def run_demo(config: Config) -> List[NewsServiceProxy]:
    missing = [r.value for r in Role if r not in {i.role for i in config.users}]
    if missing:
        raise AuthError(f"NEWS_USERS has no identity for: {', '.join(missing)}")

    logger = ProxyLogger(config.log_path or None, console=config.log_console)
    store = NewsStore()
    proxies = [NewsServiceProxy(identity, store, logger=logger) for identity in config.users]

    # the scenario is played by the first identity holding each role
    by_role: Dict[Role, NewsServiceProxy] = {}
    for proxy in proxies:
        by_role.setdefault(proxy.identity.role, proxy)

    guest = by_role[Role.GUEST]
    user = by_role[Role.USER]
    mod = by_role[Role.MODERATOR]
    admin = by_role[Role.ADMIN]

    try:
        _show(guest.add_message("I like pancakes", "Pancakes are yummy :)"))
        _show(user.add_message("Breaking News", "New breakthrough in AI technology."))
        _show(mod.add_message("Market Update", "Stocks soar after positive earnings reports."))

        _show(guest.read_message(1))
        _show(user.read_message(2))
        _show(mod.read_message(3))

        _show(mod.edit_message(1, "Updated content: AI technology is advancing rapidly."))
        _show(admin.read_message(1))
        _show(user.edit_message(1, "Updated content: technology is advancing rapidly."))
        _show(admin.read_message(1))

        _show(mod.delete_message(2))
        _show(mod.read_message(2))
        _show(admin.delete_message(2))
        _show(admin.read_message(2))
    finally:
        logger.close()
    return proxies


def _show(response: Response) -> None:
    print(str(response))
