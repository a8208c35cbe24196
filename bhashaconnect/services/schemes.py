from bhashaconnect.models.enums import Role
from bhashaconnect.models.scheme import Scheme
from bhashaconnect.services.resources import ListFilter, ResourceService, ResourceSpec
from bhashaconnect.services.validation import BooleanField, ResourceConstraints, TextField, UrlField


ADMIN_ONLY = frozenset({Role.admin})

SCHEME_CONSTRAINTS = ResourceConstraints(
    resource="scheme",
    fields=(
        TextField("title", min_length=3, max_length=255),
        TextField("description", min_length=10),
        TextField("eligibility", min_length=5),
        UrlField("link", required=False),
        TextField("language", min_length=2, max_length=50),
        TextField("category", max_length=100, required=False),
        BooleanField("is_active", default=True),
    ),
)

SCHEME_SPEC = ResourceSpec(
    name="schemes",
    model=Scheme,
    constraints=SCHEME_CONSTRAINTS,
    label="Scheme",
    plural_label="schemes",
    filters=(
        ListFilter("language", "language"),
        ListFilter("category", "category", "contains"),
    ),
    search_columns=("title", "description", "category"),
    owned=False,
    active_column="is_active",
    create_roles=ADMIN_ONLY,
    mutate_roles=ADMIN_ONLY,
)

scheme_service = ResourceService(SCHEME_SPEC)
