[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stripe_resources"
version = "0.1.0"
description = "Typed enums and request parameter models for a payments API: currencies, card brands, API versions, issuing, payments and billing."
requires-python = ">=3.11"
dependencies = []
keywords = ["payments", "billing", "currency", "enums", "api"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stripe_resources"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
