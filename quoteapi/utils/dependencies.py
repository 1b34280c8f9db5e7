from typing import Annotated

from fastapi import Depends, Request

from .schemas import Dataset


async def get_dataset(request: Request) -> Dataset:
    return request.app.state.dataset


DatasetDep = Annotated[Dataset, Depends(get_dataset)]
