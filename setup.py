from setuptools import setup, find_packages

setup(
    name="resume_onboarding",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=0.19.0",
        "pdfplumber>=0.10.0",
        "pdfminer.six>=20221105",
        "PyPDF2>=2.0.0",
        "mammoth>=1.6.0",
        "python-docx>=0.8.11",
        "chardet>=5.0.0",
        "dateparser>=1.2.0",
        "rapidfuzz>=3.0.0",
        "phonenumbers>=8.13.0",
        "click>=8.0.0",
        "tqdm>=4.60.0",
        "psutil>=5.9.0",
        "numpy>=1.19.5",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
