from pydantic import BaseModel


class UploadAcceptedResponseDTO(BaseModel):
    filename: str
    category: str
    status: str = "accepted"
