"""Tests for the ATM session state machine."""

import io
import pytest

from atm.models.exceptions import AccountNotFoundError
from atm.repositories.account_repo import AccountStore, default_accounts
from atm.services.session import EXIT_SUCCESS, AtmMachine, Session, SessionState
from atm.terminal import messages
from atm.terminal.console import Keypad, Screen


@pytest.fixture
def store():
    """Create an AccountStore holding the default accounts."""
    return AccountStore(default_accounts())


@pytest.fixture
def output():
    return io.StringIO()


def make_atm(store, output, *numbers, session=None):
    keypad = Keypad(io.StringIO(" ".join(str(n) for n in numbers) + "\n"))
    return AtmMachine(store=store, keypad=keypad, screen=Screen(output), session=session)


def logged_in(number):
    session = Session()
    session.login(number)
    return session


def test_session_defaults():
    session = Session()

    assert session.current_account_number == 0
    assert session.authenticated is False
    assert session.state is SessionState.UNAUTHENTICATED


def test_session_login_and_reset():
    session = Session()
    session.login(2)

    assert session.current_account_number == 2
    assert session.authenticated is True
    assert session.state is SessionState.MENU_LOOP

    session.reset()

    assert session.current_account_number == 0
    assert session.authenticated is False
    assert session.state is SessionState.UNAUTHENTICATED


def test_authenticate_user_success(store, output):
    """Scenario A through the ATM."""
    atm = make_atm(store, output, 1, 11)

    assert atm.authenticate_user() is True
    assert atm.session.authenticated is True
    assert atm.session.current_account_number == 1
    assert atm.session.state is SessionState.MENU_LOOP


def test_authenticate_user_wrong_pin(store, output):
    """Scenario B through the ATM."""
    atm = make_atm(store, output, 1, 99)

    assert atm.authenticate_user() is False
    assert atm.session.authenticated is False
    assert atm.session.current_account_number == 0
    assert messages.ERR_AUTH in output.getvalue()
    assert store.get_balance(1) == 1000


def test_authenticate_user_unknown_account(store, output):
    atm = make_atm(store, output, 9, 99)

    assert atm.authenticate_user() is False
    assert atm.session.state is SessionState.UNAUTHENTICATED


def test_dispatch_balance_inquiry(store, output):
    atm = make_atm(store, output, session=logged_in(1))

    state = atm.dispatch(1)

    assert state is SessionState.MENU_LOOP
    assert messages.BALANCE + "1000" in output.getvalue()


def test_dispatch_withdrawal_and_deposit(store, output):
    atm = make_atm(store, output, 500, 250, session=logged_in(3))

    atm.dispatch(2)
    atm.dispatch(3)

    assert store.get_balance(3) == 2750
    assert atm.session.state is SessionState.MENU_LOOP


def test_dispatch_exit_resets_session(store, output):
    atm = make_atm(store, output, session=logged_in(2))

    state = atm.dispatch(4)

    assert state is SessionState.UNAUTHENTICATED
    assert atm.session.current_account_number == 0
    assert atm.session.authenticated is False


def test_dispatch_terminate(store, output):
    """Scenario F: command 5 terminates."""
    atm = make_atm(store, output, session=logged_in(1))

    assert atm.dispatch(5) is SessionState.TERMINATED


def test_dispatch_invalid_choice(store, output):
    """Scenario F: command 6 is reported and the menu loop continues."""
    atm = make_atm(store, output, session=logged_in(1))

    state = atm.dispatch(6)

    assert state is SessionState.MENU_LOOP
    assert messages.ERR_CHOICE in output.getvalue()


def test_perform_transactions_shows_menu_again_after_invalid_choice(store, output):
    atm = make_atm(store, output, 6, 4, session=logged_in(1))

    state = atm.perform_transactions()

    assert state is SessionState.UNAUTHENTICATED
    assert output.getvalue().count("MENU:") == 2


def test_run_terminates_with_success(store, output):
    """Log in, check the balance, then terminate."""
    atm = make_atm(store, output, 1, 11, 1, 5)

    assert atm.run() == EXIT_SUCCESS
    assert atm.session.state is SessionState.TERMINATED
    assert messages.BALANCE + "1000" in output.getvalue()


def test_run_retries_authentication(store, output):
    atm = make_atm(store, output, 1, 99, 7, 11, 1, 11, 5)

    assert atm.run() == EXIT_SUCCESS
    assert output.getvalue().count(messages.ERR_AUTH) == 2


def test_run_serves_next_customer_after_exit(store, output):
    """Exit ends one customer's session; the next customer logs in fresh."""
    atm = make_atm(
        store, output,
        1, 11, 3, 500, 4,
        2, 22, 2, 5000, 2, 0, 1, 5,
    )

    assert atm.run() == EXIT_SUCCESS

    text = output.getvalue()
    assert store.get_balance(1) == 1500
    assert store.get_balance(2) == 2000
    assert text.count(messages.WELCOME) == 2
    assert text.count(messages.GOODBYE) == 1
    assert messages.ERR_DEBIT in text
    assert messages.CANCEL_DEBIT in text
    assert messages.BALANCE + "2000" in text


def test_dispatch_with_missing_account_is_fatal(output):
    """A session for an account the store does not hold is an internal error."""
    store = AccountStore([])
    atm = make_atm(store, output, session=logged_in(1))

    with pytest.raises(AccountNotFoundError):
        atm.dispatch(1)


def test_run_passes_negative_amounts_through(store, output):
    """Negative amounts are not validated: they move the balance the other way."""
    atm = make_atm(store, output, 1, 11, 2, -500, 3, -5000, 1, 5)

    assert atm.run() == EXIT_SUCCESS
    assert store.get_balance(1) == -3500
    assert messages.BALANCE + "-3500" in output.getvalue()
