from fastapi import APIRouter

from me_tool.api.endpoints import activities, auth, home, project, staff, strategic, team

api_router = APIRouter()

api_router.include_router(home.router)
api_router.include_router(auth.router)
api_router.include_router(strategic.router)
api_router.include_router(project.router)
api_router.include_router(activities.router)
api_router.include_router(team.router)
api_router.include_router(staff.router)
