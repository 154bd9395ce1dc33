from pydantic import BaseModel, Field

# passlib refuses longer secrets
MAX_PASSWORD_LENGTH = 4096

# Range of the store's INTEGER column
MIN_QUANTITY = -(2 ** 63)
MAX_QUANTITY = 2 ** 63 - 1


class AccountCredentials(BaseModel):
    username: str
    password: str = Field(..., max_length=MAX_PASSWORD_LENGTH)


class RegistrationResponse(BaseModel):
    msg: str = "User created"


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


# Products
class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1)
    sku: str = Field(..., min_length=1)
    quantity: int = Field(0, ge=MIN_QUANTITY, le=MAX_QUANTITY)
    price: float = Field(0.0, allow_inf_nan=False)


class ProductCreated(BaseModel):
    id: str


class QuantityUpdate(BaseModel):
    quantity: int = Field(..., ge=MIN_QUANTITY, le=MAX_QUANTITY)


class QuantityResponse(BaseModel):
    id: str
    quantity: int


class ProductResponse(BaseModel):
    id: str
    name: str
    sku: str
    quantity: int
    price: float

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Schema for error responses.
    """
    error: str = Field(..., description="Error message")
