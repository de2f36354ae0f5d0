from fastapi import APIRouter

from helpshelf_site.routers.v1 import facets, resources

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(resources.router)
v1_router.include_router(facets.router)
