from setuptools import setup, find_namespace_packages

# Read version from package
version = {}
with open("src/lexeme_practice/__init__.py") as f:
    for line in f:
        if line.startswith("__version__"):
            exec(line, version)
            break

setup(
    name="lexeme_practice",
    version=version.get("__version__", "0.1.0"),
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["lexeme_practice", "lexeme_practice.*"]),
    python_requires=">=3.10",
    install_requires=[
        "google-genai",
        "openai",
        "pycountry",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
