"""Text shown on the ATM screen."""

WELCOME = "\nWelcome!\n"
GOODBYE = "\tBye..."
BALANCE = "\tBalance: "

ERR_AUTH = "\n\tError: wrong account number or PIN number."
ERR_CHOICE = "\tWrong choice. Enter number between 1 and 5"
ERR_DEBIT = "\tInsufficient balance"

INPUT_NUMBER = "\tEnter your account number: "
INPUT_PIN = "\tEnter your PIN number: "
INPUT_AMOUNT = "\tEnter amount (0 to cancel): "
INPUT_CHOICE = "\tChoice: "

CANCEL_CREDIT = "\tCancel the deposit"
CANCEL_DEBIT = "\tCancel the withdraw"

FINISH_CREDIT = "\tComplete the deposit"
FINISH_DEBIT = "\tComplete the withdraw"

MENU_TITLE = "\n\t\t     MENU:\n"
MENU_LABELS = {
    1: "Inquiry balance",
    2: "Withdraw",
    3: "Deposit",
    4: "Exit",
    5: "Bye",
}
