"""Errors raised while provisioning accounts."""


class AccountError(Exception):
    pass


class AccountAlreadyExistsError(AccountError):
    """The username is taken; seeding must not create a second admin."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"username already exists: {username}")
