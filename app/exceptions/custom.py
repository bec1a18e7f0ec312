class ValidationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NoValidImagesError(ValidationError):
    def __init__(self, message: str = "No valid image URLs provided"):
        super().__init__(message)


class AllDuplicateError(ValidationError):
    def __init__(self, message: str = "All images already exist for this hotel"):
        super().__init__(message)


class InvalidNameError(Exception):
    def __init__(self, name: str | None):
        self.name = name
        self.message = "Invalid hotel name."
        super().__init__(f"Invalid hotel name: {name!r}")


class NotFoundError(Exception):
    def __init__(self, entity: str, key: str | None = None):
        self.entity = entity
        self.key = key
        self.message = f"{entity} not found"
        super().__init__(self.message)


class DependencyFailureError(Exception):
    def __init__(self, message: str, dependency: str):
        self.message = message
        self.dependency = dependency
        super().__init__(message)


class StoreError(DependencyFailureError):
    def __init__(self, message: str):
        super().__init__(message, dependency="store")


class MailDeliveryError(DependencyFailureError):
    def __init__(self, message: str):
        super().__init__(message, dependency="mail")
