import enum


class Role(str, enum.Enum):
    admin = "admin"
    entrepreneur = "entrepreneur"
    jobseeker = "jobseeker"


class TrainingType(str, enum.Enum):
    video = "video"
    pdf = "pdf"
    text = "text"
    infographic = "infographic"
