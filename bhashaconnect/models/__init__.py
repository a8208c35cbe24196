from bhashaconnect.models.enums import Role, TrainingType
from bhashaconnect.models.job import Job
from bhashaconnect.models.marketplace import MarketplaceEntry
from bhashaconnect.models.scheme import Scheme
from bhashaconnect.models.training import TrainingContent
from bhashaconnect.models.user import User

__all__ = [
	"Job",
	"MarketplaceEntry",
	"Role",
	"Scheme",
	"TrainingContent",
	"TrainingType",
	"User",
]
