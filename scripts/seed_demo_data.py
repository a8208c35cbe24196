from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from bhashaconnect.config import build_sqlalchemy_db_url, settings  # noqa: E402
from bhashaconnect.database import Base, SessionLocal, engine  # noqa: E402
from bhashaconnect.models import Job, MarketplaceEntry, Role, Scheme, TrainingContent, TrainingType, User  # noqa: E402
from bhashaconnect.utils.password_hash import hash_password  # noqa: E402


DEMO_PASSWORD = "password123"

USERS = [
    ("Admin User", "admin@bhashaconnect.com", Role.admin),
    ("Rajesh Kumar", "rajesh@example.com", Role.jobseeker),
    ("Priya Sharma", "priya@example.com", Role.entrepreneur),
    ("Amit Patel", "amit@example.com", Role.jobseeker),
    ("Sunita Devi", "sunita@example.com", Role.entrepreneur),
]

JOBS = [
    {
        "title": "Software Developer - React/Node.js",
        "description": "We are looking for a skilled software developer with experience in React and Node.js.",
        "category": "Technology",
        "location": "Mumbai, Maharashtra",
        "language": "English",
        "owner": "admin@bhashaconnect.com",
    },
    {
        "title": "मार्केटिंग मैनेजर - मराठी भाषा",
        "description": "मराठी भाषा में काम करने वाले मार्केटिंग मैनेजर की आवश्यकता है।",
        "category": "Marketing",
        "location": "Pune, Maharashtra",
        "language": "Marathi",
        "owner": "admin@bhashaconnect.com",
    },
    {
        "title": "Sales Executive - Hindi Speaking",
        "description": "हिंदी भाषा में बातचीत करने वाले सेल्स एक्जीक्यूटिव की आवश्यकता है।",
        "category": "Sales",
        "location": "Delhi, NCR",
        "language": "Hindi",
        "owner": "priya@example.com",
    },
]

TRAINING = [
    {
        "title": "Digital Marketing Basics - English",
        "type": TrainingType.video,
        "url": "https://www.youtube.com/watch?v=example1",
        "language": "English",
        "description": "Learn the fundamentals of digital marketing including SEO and social media.",
        "owner": "priya@example.com",
    },
    {
        "title": "छोटे व्यवसाय के लिए मार्केटिंग - हिंदी",
        "type": TrainingType.pdf,
        "url": "https://example.com/small-business-marketing-hindi.pdf",
        "language": "Hindi",
        "description": "छोटे व्यवसायों के लिए मार्केटिंग रणनीतियों की पूरी गाइड।",
        "owner": "priya@example.com",
    },
    {
        "title": "वरहाडी व्यापारीकरण",
        "type": TrainingType.text,
        "url": "https://example.com/varhadi-business-guide.txt",
        "language": "Varhadi",
        "description": "वरहाडी भाषा में व्यापार शुरू करने की जानकारी।",
        "owner": "sunita@example.com",
    },
]

MARKETPLACE = [
    {
        "business_name": "Rajesh Handicrafts",
        "owner_name": "Rajesh Kumar",
        "product_service": "Handmade wooden furniture and decorative items",
        "contact": "+91-9876543210, rajesh.handicrafts@email.com",
        "language": "English",
        "location": "Mumbai, Maharashtra",
        "owner": "rajesh@example.com",
    },
    {
        "business_name": "Sunita Organic Farm",
        "owner_name": "Sunita Devi",
        "product_service": "Organic vegetables and fruits",
        "contact": "+91-9876543213",
        "language": "Varhadi",
        "location": "Amravati, Maharashtra",
        "owner": "sunita@example.com",
    },
]

SCHEMES = [
    {
        "title": "Pradhan Mantri Mudra Yojana",
        "description": "Loans up to 10 lakh for non-corporate, non-farm small and micro enterprises.",
        "eligibility": "Any Indian citizen who has a business plan for a non-farm income generating activity.",
        "link": "https://www.mudra.org.in/",
        "language": "English",
        "category": "Finance",
    },
    {
        "title": "महाराष्ट्र स्टार्टअप पॉलिसी",
        "description": "महाराष्ट्र में नए स्टार्टअप को सहायता और प्रोत्साहन।",
        "eligibility": "महाराष्ट्र के निवासी जो नया व्यवसाय शुरू करना चाहते हैं।",
        "link": "https://www.maharashtrastartup.com/",
        "language": "Marathi",
        "category": "Startup",
    },
    {
        "title": "Stand Up India Scheme",
        "description": "Bank loans between 10 lakh and 1 crore for greenfield enterprises.",
        "eligibility": "SC/ST and/or women entrepreneurs, above 18 years of age.",
        "link": "https://www.standupmitra.in/",
        "language": "English",
        "category": "Finance",
    },
]


def _ensure_tables() -> None:
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed demo users and listings in all four languages.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete existing listings and demo users before seeding",
    )
    args = parser.parse_args(argv)

    _ensure_tables()

    with SessionLocal() as db:
        if args.reset:
            for model in (Job, TrainingContent, MarketplaceEntry, Scheme):
                db.query(model).delete()
            db.query(User).filter(User.email.in_([email for _, email, _ in USERS])).delete(synchronize_session=False)
            db.commit()

        users: dict[str, User] = {}
        for name, email, role in USERS:
            user = db.query(User).filter(User.email == email).first()
            if user is None:
                user = User(name=name, email=email, password=hash_password(DEMO_PASSWORD), role=role)
                db.add(user)
            users[email] = user
        db.flush()

        for model, rows in ((Job, JOBS), (TrainingContent, TRAINING), (MarketplaceEntry, MARKETPLACE)):
            for row in rows:
                values = dict(row)
                owner = users[values.pop("owner")]
                db.add(model(created_by=owner.id, **values))

        for row in SCHEMES:
            db.add(Scheme(**row))

        db.commit()

    print(f"seeded {len(USERS)} users, {len(JOBS)} jobs, {len(TRAINING)} training items, "
          f"{len(MARKETPLACE)} marketplace entries, {len(SCHEMES)} schemes")
    print(f"demo password for every user: {DEMO_PASSWORD}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
