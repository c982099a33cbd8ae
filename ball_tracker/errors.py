class BallTrackerError(Exception):
    pass


class UserIdTakenError(BallTrackerError):
    def __init__(self, user_id):
        super().__init__(f'ID "{user_id}" is already taken.')
        self.user_id = user_id


class NothingToExportError(BallTrackerError):
    def __init__(self):
        super().__init__("No history to export.")
