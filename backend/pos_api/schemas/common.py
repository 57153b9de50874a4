from pydantic import BaseModel


class CreadoResponse(BaseModel):
    id: int
    message: str


class MensajeResponse(BaseModel):
    message: str
