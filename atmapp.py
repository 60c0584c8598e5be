import logging
import sys

from dotenv import load_dotenv

from atm.repositories.account_repo import AccountStore, default_accounts
from atm.services.session import AtmMachine
from atm.terminal.console import Keypad, Screen
from config.settings import Settings


def setup_logging(settings: Settings) -> logging.Logger:
    logger = logging.getLogger('atm')
    logger.setLevel(settings.log_level_value)
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    logger.addHandler(handler)
    return logger


def build_atm(keypad: Keypad, screen: Screen) -> AtmMachine:
    store = AccountStore(default_accounts())
    return AtmMachine(store=store, keypad=keypad, screen=screen)


def main() -> int:
    load_dotenv()
    settings = Settings.load()
    setup_logging(settings)

    atm = build_atm(Keypad(), Screen())
    return atm.run()


if __name__ == '__main__':
    sys.exit(main())
