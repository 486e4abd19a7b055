from pathlib import Path

from setuptools import find_packages, setup


def load_requirements() -> list[str]:
    req_path = Path(__file__).parent / "requirements.txt"
    lines = req_path.read_text(encoding="utf-8").splitlines()
    return [
        line.strip()
        for line in lines
        if line.strip() and not line.strip().startswith("#")
    ]


setup(
    name="conjuga",
    version="0.1.0",
    description="Scrape Spanish verb conjugation tables into records and flashcards",
    packages=find_packages(include=["conjuga", "conjuga.*"]),
    install_requires=load_requirements(),
    extras_require={
        "test": ["pytest>=8.0", "pytest-asyncio>=0.23"],
    },
    entry_points={
        "console_scripts": [
            "conjuga=conjuga.__main__:main",
        ]
    },
)
