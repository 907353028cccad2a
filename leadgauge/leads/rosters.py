"""
Lead Rosters

Fixed pools the synthesizer samples from. Tuples throughout so nothing
downstream can mutate the shared rosters.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class Company(NamedTuple):
    name: str
    domain: str
    size: str


FALLBACK_INDUSTRY = "Other"


COMPANIES_BY_INDUSTRY: Mapping[str, Tuple[Company, ...]] = MappingProxyType({
    "Technology": (
        Company("TechFlow Solutions", "techflow.com", "medium"),
        Company("DataSync Corp", "datasync.io", "large"),
        Company("CloudBridge Systems", "cloudbridge.net", "small"),
        Company("AI Innovations Inc", "aiinnovations.com", "startup"),
        Company("DevOps Masters", "devopsmaster.org", "medium"),
        Company("CyberSecure Pro", "cybersecure.biz", "large"),
        Company("MobileFirst Labs", "mobilefirst.co", "startup"),
        Company("BlockChain Dynamics", "blockchain-dyn.com", "medium"),
    ),
    "E-commerce": (
        Company("ShopSmart Online", "shopsmart.store", "large"),
        Company("EcoGoods Market", "ecogoods.shop", "medium"),
        Company("Fashion Forward", "fashionforward.com", "large"),
        Company("Home Essentials Plus", "homeessentials.net", "medium"),
        Company("Tech Gadgets Hub", "techgadgets.co", "small"),
        Company("Artisan Crafts Co", "artisancrafts.org", "small"),
    ),
    "Healthcare": (
        Company("MedTech Solutions", "medtech-sol.com", "large"),
        Company("HealthFirst Clinic", "healthfirst.med", "medium"),
        Company("WellCare Systems", "wellcare.health", "large"),
        Company("Digital Health Pro", "digitalhealth.io", "startup"),
        Company("Pharma Innovations", "pharmainno.com", "enterprise"),
    ),
    "Finance": (
        Company("FinTech Dynamics", "fintech-dyn.com", "large"),
        Company("Investment Partners", "investpartners.biz", "large"),
        Company("CryptoSecure Bank", "cryptosecure.bank", "medium"),
        Company("Wealth Management Pro", "wealthmgmt.co", "medium"),
        Company("PayFlow Solutions", "payflow.net", "startup"),
    ),
    "Education": (
        Company("EduTech Academy", "edutech.edu", "medium"),
        Company("Learning Dynamics", "learndynamics.org", "large"),
        Company("SkillBuilder Pro", "skillbuilder.com", "startup"),
        Company("University Connect", "uniconnect.edu", "large"),
    ),
    "Real Estate": (
        Company("PropTech Solutions", "proptech.realty", "medium"),
        Company("Urban Development Co", "urbandev.com", "large"),
        Company("Smart Homes Inc", "smarthomes.co", "medium"),
        Company("Commercial Properties", "commercialprop.biz", "large"),
    ),
    FALLBACK_INDUSTRY: (
        Company("Global Consulting Group", "globalconsult.com", "large"),
        Company("Innovation Partners", "innovpartners.co", "medium"),
        Company("Strategic Solutions", "strategicsol.biz", "medium"),
        Company("Business Dynamics", "bizdynamics.org", "small"),
    ),
})


DEFAULT_JOB_TITLES: Tuple[str, ...] = (
    "CEO", "CTO", "CMO", "VP of Sales", "VP of Marketing",
    "Director of Operations", "Head of Business Development",
    "Sales Manager", "Marketing Manager", "Product Manager",
    "Business Development Manager", "Account Manager",
    "Digital Marketing Director", "Growth Manager",
)

FIRST_NAMES: Tuple[str, ...] = (
    "Alex", "Sarah", "Michael", "Emma", "David", "Lisa", "John", "Jennifer",
    "Robert", "Jessica", "William", "Ashley", "James", "Amanda", "Christopher",
    "Melissa", "Daniel", "Michelle", "Matthew", "Kimberly", "Anthony", "Amy",
    "Mark", "Angela", "Donald", "Helen", "Steven", "Brenda", "Andrew", "Nicole",
)

LAST_NAMES: Tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller",
    "Davis", "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez",
    "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez", "Clark",
)

LOCATIONS: Tuple[str, ...] = (
    "New York, NY", "Los Angeles, CA", "Chicago, IL", "Houston, TX",
    "Phoenix, AZ", "Philadelphia, PA", "San Antonio, TX", "San Diego, CA",
    "Dallas, TX", "San Jose, CA", "Austin, TX", "Jacksonville, FL",
    "Fort Worth, TX", "Columbus, OH", "Charlotte, NC", "San Francisco, CA",
    "Indianapolis, IN", "Seattle, WA", "Denver, CO", "Boston, MA",
)


def companies_for_industry(industry: str) -> Tuple[Company, ...]:
    """Companies for an industry, or the generic roster if it is unknown."""
    return COMPANIES_BY_INDUSTRY.get(industry) or COMPANIES_BY_INDUSTRY[FALLBACK_INDUSTRY]
