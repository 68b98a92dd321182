# datekit/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided values (date text, config, etc).
    Should NOT print traceback.
    """
