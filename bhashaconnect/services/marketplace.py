from bhashaconnect.models.marketplace import MarketplaceEntry
from bhashaconnect.services.resources import ListFilter, ResourceService, ResourceSpec
from bhashaconnect.services.validation import ResourceConstraints, TextField


MARKETPLACE_CONSTRAINTS = ResourceConstraints(
    resource="marketplace entry",
    fields=(
        TextField("business_name", min_length=2, max_length=255),
        TextField("owner_name", min_length=2, max_length=255),
        TextField("product_service", min_length=5),
        TextField("contact", min_length=5, max_length=255),
        TextField("language", min_length=2, max_length=50),
        TextField("location", max_length=255, required=False),
        TextField("description", max_length=1000, required=False),
    ),
)

MARKETPLACE_SPEC = ResourceSpec(
    name="marketplace",
    model=MarketplaceEntry,
    constraints=MARKETPLACE_CONSTRAINTS,
    label="Marketplace entry",
    plural_label="marketplace entries",
    filters=(
        ListFilter("language", "language"),
        ListFilter("location", "location", "contains"),
    ),
    search_columns=("business_name", "product_service", "description"),
)

marketplace_service = ResourceService(MARKETPLACE_SPEC)
