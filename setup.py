from setuptools import setup, find_packages

setup(
    name="faq_system",
    version="0.1.0",
    packages=find_packages(include=["faq_system", "faq_system.*"]),
    install_requires=[
        "pyyaml",  # For config file parsing and Markdown frontmatter
        "pymupdf",  # For PDF text extraction
        "python-docx",  # For DOCX text extraction
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "faq-system=faq_system.__main__:main",
        ],
    },
    python_requires=">=3.9",
)
