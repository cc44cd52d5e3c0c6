from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="cryfa",
    version="1.1.0",
    packages=find_packages(include=["cryfa", "cryfa.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "cryptography>=41.0.0",
        "numpy>=1.24.0",
    ],
    entry_points={
        "console_scripts": [
            "cryfa=cryfa.main:main",
            "cryfa-keygen=cryfa.keygen:main",
        ],
    },
    python_requires=">=3.10",
    description="A FASTA encryption and decryption tool",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
