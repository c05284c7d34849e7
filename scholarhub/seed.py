"""
Seed tables loaded into the in-memory stores at startup.
"""
from datetime import date

from .models.schemas import Scholarship, University


SEED_SCHOLARSHIPS = [
    Scholarship(
        id="s1",
        name="Global Academic Excellence Scholarship",
        description="Full tuition scholarship for international students demonstrating outstanding academic achievement.",
        country="USA",
        budget=50000,
        major="Any",
        deadline=date(2024, 12, 31),
        url="https://www.scholarship-usa.org/global-excellence",
        organization="Global Scholars Foundation",
    ),
    Scholarship(
        id="s2",
        name="European Union STEM Grant",
        description="Supports students pursuing Science, Technology, Engineering, and Mathematics degrees in EU countries.",
        country="Germany",
        budget=15000,
        major="Engineering",
        deadline=date(2025, 1, 15),
        url="https://www.eu-grants.org/stem",
        organization="European Research Council",
    ),
    Scholarship(
        id="s3",
        name="Commonwealth Scholarship and Fellowship Plan",
        description="For students from Commonwealth countries to study in another Commonwealth country.",
        country="UK",
        budget=30000,
        major="Social Sciences",
        deadline=date(2024, 11, 1),
        url="https://www.cscuk.dfid.gov.uk/",
        organization="Commonwealth Scholarship Commission",
    ),
    Scholarship(
        id="s4",
        name="Australia Awards Scholarships",
        description="Long and short term awards funded by the Australian Government for eligible developing countries.",
        country="Australia",
        budget=40000,
        major="Any",
        deadline=date(2025, 2, 28),
        url="https://www.dfat.gov.au/people-to-people/australia-awards/Pages/australia-awards-scholarships",
        organization="Australian Department of Foreign Affairs and Trade",
    ),
    Scholarship(
        id="s5",
        name="Japanese Government (MEXT) Scholarships",
        description="Scholarships for international students to study in Japan.",
        country="Japan",
        budget=18000,
        major="Computer Science",
        deadline=date(2024, 10, 20),
        url="https://www.studyjapan.go.jp/en/toj/toj0302e.html",
        organization="Ministry of Education, Culture, Sports, Science and Technology",
    ),
    Scholarship(
        id="s6",
        name="Log IQ Opportunity Scholarship",
        description="Scholarship for students demonstrating exceptional logical and quantitative intelligence in STEM fields.",
        country="Canada",
        budget=25000,
        major="Computer Science",
        deadline=date(2025, 3, 1),
        url="https://www.logiqscholarship.org",
        organization="Log IQ Foundation",
    ),
]

SEED_UNIVERSITIES = [
    University(
        id="u1",
        name="Harvard University",
        country="USA",
        programs=["Computer Science", "Business Administration", "Law"],
        url="https://www.harvard.edu/",
        logo_url="https://picsum.photos/50/50?random=1",
    ),
    University(
        id="u2",
        name="University of Oxford",
        country="UK",
        programs=["Medicine", "Engineering", "Social Sciences"],
        url="https://www.ox.ac.uk/",
        logo_url="https://picsum.photos/50/50?random=2",
    ),
    University(
        id="u3",
        name="Technical University of Munich",
        country="Germany",
        programs=["Engineering", "Natural Sciences", "Architecture"],
        url="https://www.tum.de/en/",
        logo_url="https://picsum.photos/50/50?random=3",
    ),
    University(
        id="u4",
        name="University of Sydney",
        country="Australia",
        programs=["Arts", "Education", "Computer Science"],
        url="https://www.sydney.edu.au/",
        logo_url="https://picsum.photos/50/50?random=4",
    ),
    University(
        id="u5",
        name="University of Tokyo",
        country="Japan",
        programs=["Engineering", "Law", "Medicine"],
        url="https://www.u-tokyo.ac.jp/en/",
        logo_url="https://picsum.photos/50/50?random=5",
    ),
    University(
        id="u6",
        name="Turkey University",
        country="Turkey",
        programs=["Engineering", "Business Administration", "Social Sciences"],
        url="https://www.turkey-uni.edu.tr",
        logo_url="https://picsum.photos/50/50?random=6",
    ),
]

# (id, email, role, password)
SEED_ACCOUNTS = [
    ("1", "student@example.com", "student", "password"),
    ("2", "admin@example.com", "admin", "password"),
]

# Federated sign-in always resolves to this seeded account
GOOGLE_ACCOUNT_EMAIL = "student@example.com"
