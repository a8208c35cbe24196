from bhashaconnect.models.enums import Role, TrainingType
from bhashaconnect.models.training import TrainingContent
from bhashaconnect.services.resources import ListFilter, ResourceService, ResourceSpec
from bhashaconnect.services.validation import ChoiceField, ResourceConstraints, TextField, UrlField


TRAINING_AUTHOR_ROLES = frozenset({Role.entrepreneur, Role.admin})

TRAINING_CONSTRAINTS = ResourceConstraints(
    resource="training content",
    fields=(
        TextField("title", min_length=3, max_length=255),
        ChoiceField("type", choices=tuple(t.value for t in TrainingType)),
        UrlField("url"),
        TextField("language", min_length=2, max_length=50),
        TextField("description", max_length=1000, required=False),
    ),
)

TRAINING_SPEC = ResourceSpec(
    name="training",
    model=TrainingContent,
    constraints=TRAINING_CONSTRAINTS,
    label="Training content",
    plural_label="training content",
    filters=(
        ListFilter("type", "type", choices=tuple(t.value for t in TrainingType)),
        ListFilter("language", "language"),
    ),
    create_roles=TRAINING_AUTHOR_ROLES,
    mutate_roles=TRAINING_AUTHOR_ROLES,
)

training_service = ResourceService(TRAINING_SPEC)
