from bhashaconnect.models.job import Job
from bhashaconnect.services.resources import ListFilter, ResourceService, ResourceSpec
from bhashaconnect.services.validation import ResourceConstraints, TextField


JOB_CONSTRAINTS = ResourceConstraints(
    resource="job",
    fields=(
        TextField("title", min_length=3, max_length=255),
        TextField("description", min_length=10),
        TextField("category", min_length=2, max_length=100),
        TextField("location", min_length=2, max_length=255),
        TextField("language", min_length=2, max_length=50),
    ),
)

JOB_SPEC = ResourceSpec(
    name="jobs",
    model=Job,
    constraints=JOB_CONSTRAINTS,
    label="Job",
    plural_label="jobs",
    filters=(
        ListFilter("category", "category", "contains"),
        ListFilter("location", "location", "contains"),
        ListFilter("language", "language"),
    ),
)

job_service = ResourceService(JOB_SPEC)
