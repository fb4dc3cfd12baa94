from pydantic import BaseModel, Field


class PredictBehaviorRequest(BaseModel):
    data: list[float] | None = Field(
        None, description="Feature vector: numerical features first, then categorical codes"
    )
