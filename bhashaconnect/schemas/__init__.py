from bhashaconnect.schemas.common import Acknowledgement, Envelope, Pagination
from bhashaconnect.schemas.job import JobItem, JobList, JobRead
from bhashaconnect.schemas.marketplace import (
	MarketplaceEntryItem,
	MarketplaceEntryList,
	MarketplaceEntryRead,
	MarketplaceSearchResults,
)
from bhashaconnect.schemas.scheme import SchemeItem, SchemeList, SchemeRead, SchemeSearchResults
from bhashaconnect.schemas.training import (
	TrainingContentByType,
	TrainingContentItem,
	TrainingContentList,
	TrainingContentRead,
)
from bhashaconnect.schemas.user import Token, TokenData, UserCreate, UserItem, UserLogin, UserRead

__all__ = [
	"Acknowledgement",
	"Envelope",
	"Pagination",
	"JobItem",
	"JobList",
	"JobRead",
	"MarketplaceEntryItem",
	"MarketplaceEntryList",
	"MarketplaceEntryRead",
	"MarketplaceSearchResults",
	"SchemeItem",
	"SchemeList",
	"SchemeRead",
	"SchemeSearchResults",
	"TrainingContentByType",
	"TrainingContentItem",
	"TrainingContentList",
	"TrainingContentRead",
	"Token",
	"TokenData",
	"UserCreate",
	"UserItem",
	"UserLogin",
	"UserRead",
]
