from pydantic import BaseModel

class Notification(BaseModel):
    level: str
    message: str

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(level="success", message=message)

    @classmethod
    def error(cls, message: str) -> "Notification":
        return cls(level="error", message=message)

    @property
    def is_error(self) -> bool:
        return self.level == "error"
