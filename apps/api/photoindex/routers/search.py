from typing import List, Optional

from fastapi import APIRouter, Depends

from photoindex.dependencies import get_search_service, search_phrase
from photoindex.schemas.photos import PhotoResult
from photoindex.services.search_service import SearchService

router = APIRouter(prefix="/search", tags=["search"])

@router.get("", response_model=List[PhotoResult])
def search_endpoint(q: Optional[str] = Depends(search_phrase),
                    svc: Optional[SearchService] = Depends(get_search_service)) -> List[PhotoResult]:
    if q is None or svc is None:
        return []
    return svc.execute(q)
