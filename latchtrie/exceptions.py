class LatchError(RuntimeError):
    """An error indicating that a latch was released in a mode it was not held in"""

    def __init__(self, mode):
        super().__init__(f'cannot release {mode} latch: it is not held')
