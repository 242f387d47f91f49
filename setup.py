"""
Setup for creating whl
"""

import setuptools

setuptools.setup(
    author="Biosymbolics",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    description="Patent search & analytics dashboard",
    name="patent-search-analytics",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src", exclude=["*.test", "*.test.*"]),
    py_modules=["system"],
    python_requires=">=3.10",
    install_requires=[
        "altair>=5.0",
        "pandas>=2.0",
        "polars>=0.20.5",
        "pydantic>=2.0",
        "pydash>=7.0",
        "python-dotenv>=1.0",
        "requests>=2.28",
        "streamlit>=1.36",
        "vl-convert-python>=1.0",
    ],
    extras_require={"test": ["pytest>=7.0"]},
    version="0.0.1",  # upon change, update requirements.txt as well
)
