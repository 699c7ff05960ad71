from portfolio.models import Project

PROJECTS: tuple[Project, ...] = (
    Project(
        name="Kompa",
        description=(
            "A comparables marketplace for the built environment, providing access to verified property data "
            "and insights."
        ),
        accent="#FF7E44",
        repo="",
        live="https://kompa-web.vercel.app/",
        image="",
    ),
    Project(
        name="Yenko Studio",
        description="A platform that transforms creative ideas into digital products through technology and design.",
        accent="#FF7E44",
        repo="",
        live="https://yenko.studio",
        image="",
    ),
    Project(
        name="Vwaza Web",
        description="The main site for Vwaza, showcasing its mission, features, and opportunities for African creators.",
        accent="#FF7E44",
        repo="",
        live="https://vwaza.com/",
        image="",
    ),
    Project(
        name="Vwaza Music Player",
        description="An online music player for streaming and discovering songs from African artists.",
        accent="#FF7E44",
        repo="",
        live="https://music.vwaza.com/",
        image="",
    ),
    Project(
        name="M11 Collections",
        description="A luxury rental platform offering high-end homes and hotel-style stays for modern travelers.",
        accent="#FF7E44",
        repo="",
        live="https://www.m11collection.com/",
        image="",
    ),
    Project(
        name="NIC Complaints Hub",
        description="A portal for Ghanaians to file and track complaints against insurance companies and agents.",
        accent="#FF7E44",
        repo="",
        live="https://niccomplaintshub.com/",
        image="",
    ),
)
