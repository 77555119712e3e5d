from setuptools import setup, find_packages

setup(
    name="yt-scribe",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "colorlog>=6.7.0",
        "fastapi>=0.110.0",
        "pydantic>=2.0",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "yt-scribe-api=yt_scribe_api.app:main",
        ],
    },
    python_requires=">=3.9",
    description="Fetch YouTube captions through the watch page and the Innertube get_transcript endpoint",
)
