"""Built-in content served whenever WordPress cannot supply its own.

Each accessor returns fresh model instances so callers never share lists.
"""

from typing import List

from app.models.certification import Certification
from app.models.home import AboutSection, HeroSection, HomePageData, WhyUsItem, WhyUsSection
from app.models.menu import MenuItem
from app.models.post import Post

DEFAULT_MENU_ID = "main-menu"


def default_posts() -> List[Post]:
    return []


def default_menu_items() -> List[MenuItem]:
    return [
        MenuItem(id=1, title="COMPLIANCE", url="/compliance", order=1, parent=0),
        MenuItem(id=2, title="LEARNING", url="/learning", order=2, parent=0),
        MenuItem(id=3, title="RESOURCES", url="/resources", order=3, parent=0),
        MenuItem(id=4, title="ABOUT US", url="/about-us", order=4, parent=0),
    ]


def default_certifications() -> List[Certification]:
    return [
        Certification(
            id=1,
            title="Certificate in Bidding & Staffing Associate",
            short_name="CSBA",
            description=(
                "This foundational certification equips you with the basic understanding of "
                "bidding and recruitment processes. It's perfect for individuals new to the "
                "industry who are looking to build a strong foundation."
            ),
            for_who="Anyone can join",
        ),
        Certification(
            id=2,
            title="Certificate in Bid & Man-power Professional",
            short_name="CBMP",
            description=(
                "Aimed at individuals who want to use bidding and staffing strategies to advance "
                "their careers. Builds on the CSBA, offering deeper knowledge and practical skills "
                "while opening doors to new opportunities."
            ),
            for_who="Proposal writers",
        ),
        Certification(
            id=3,
            title="Certified Staffing Management Professional",
            short_name="CSMP",
            description=(
                "Designed for resource managers, this certification enhances your skills in "
                "managing staffing operations using efficient management of all customer "
                "processes and terms."
            ),
            for_who="Resource manager",
        ),
        Certification(
            id=4,
            title="Certified Staffing And Bidding Leader",
            short_name="CSBL",
            description=(
                "This advanced certification is tailored for professionals in leadership roles. "
                "Master the strategic aspects of staffing and bidding operations. Learn to create "
                "and manage teams while driving growth."
            ),
            for_who=(
                "Operational Manager (OM), General Manager (GM), Director Consulting (DC), "
                "Account Executive (AE), Business Development Manager (BD), Director (D)"
            ),
        ),
    ]


def default_home_page_data() -> HomePageData:
    return HomePageData(
        hero=HeroSection(
            title="EMPOWERING PROFESSIONALS IN BIDDING & RECRUITMENT",
            subtitle=(
                "Join SNB Alliance to become a qualified expert in bidding & recruitment "
                "with recognized industry certifications."
            ),
            button_text="JOIN NOW",
        ),
        about=AboutSection(
            title="What is SNB ALLIANCE?",
            content=(
                "<p>We are a team dedicated to train the educated people and provide them with a "
                "detailed structure to cover the bidding & recruitment industry.</p>"
                "<p>The intellectual property and products behind this idea are the founding body "
                "of this alliance who identified the gap between the bidding and recruiting "
                "management and brokers.</p>"
                "<p><strong>We aspire that the recruiters & proposal writers be considered as the "
                "qualified ones.</strong></p>"
                "<p>The key idea is to bring the two ends of roles so that they can work "
                "peacefully.</p>"
            ),
        ),
        why_us=WhyUsSection(
            title="Why Us?",
            items=[
                WhyUsItem(
                    id=1,
                    text=(
                        "Increase the industrial awareness and expand the tactics of bidding, "
                        "recruitment, and proposals."
                    ),
                ),
                WhyUsItem(
                    id=2,
                    text="Exams are methodized to assess the skill sets before awarding the certificates.",
                ),
                WhyUsItem(
                    id=3,
                    text=(
                        "New members are always welcomed and they are enlightened by the senior "
                        "members & mentors."
                    ),
                ),
                WhyUsItem(
                    id=4,
                    text=(
                        "Your career soars with each session and ultimately you evolve into a "
                        "global leader."
                    ),
                ),
                WhyUsItem(
                    id=5,
                    text=(
                        "SNB Alliance is an advanced platform where professional achievers help "
                        "other professionals to reach their goals."
                    ),
                ),
            ],
        ),
    )
