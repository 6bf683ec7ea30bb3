from pydantic import BaseModel, ConfigDict, Field


class FilfoxTransferRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    height: int
    timestamp: int
    message: str
    from_: str = Field(alias="from")
    to: str
    value: str  # attoFIL, signed decimal string
    type: str  # send | receive | miner-fee | burn-fee


class FilfoxTransfersPage(BaseModel):
    totalCount: int
    transfers: list[FilfoxTransferRecord] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)
