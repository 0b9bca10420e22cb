from app.api.routes.auth_routes import router as auth_router
from app.api.routes.user_routes import router as user_router
from app.api.routes.photos_routes import router as photos_router
from app.api.routes.albums_router import router as albums_router
from app.api.routes.likes_routes import router as likes_router
from app.api.routes.feed_routes import router as feed_router
from app.api.routes.check_routes import router as check_router
