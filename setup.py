from setuptools import find_packages, setup

setup(
    name="wxmlgen",
    version="0.3.0",
    description="Code generator emitting mini-program templates from annotated template ASTs",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"wxmlgen": ["templates/*.wxml"]},
    install_requires=[
        "jinja2>=3.1",
        "markupsafe>=2.0",
        "rich>=13.0",
        "rich-click>=1.7",
    ],
    extras_require={
        "test": ["pytest>=7.0", "click>=8.0"],
    },
    entry_points={
        "console_scripts": [
            "wxmlgen=wxmlgen.cli.main:cli",
        ],
    },
    zip_safe=False,
)
