from app.database.models.users_model import UsersDatabaseModel
from app.database.models.photos_model import PhotoDatabaseModel
from app.database.models.albums_model import AlbumDatabaseModel
from app.database.models.memberships_model import MembershipDatabaseModel
from app.database.models.likes_model import LikeDatabaseModel
