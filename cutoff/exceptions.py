# cutoff/exceptions.py

class CutoffError(Exception):
    pass


class InvalidPayload(CutoffError):
    pass
