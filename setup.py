from setuptools import setup, find_packages

setup(
    name="subrip-captioning",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pysubs2>=1.8.0",
        "fastapi>=0.100.0",
        "uvicorn[standard]>=0.20.0",
        "python-multipart>=0.0.6",
    ],
    extras_require={
        'dev': [
            'pytest>=6.0',
            'httpx>=0.24.0',
            'black>=21.0',
            'isort>=5.0',
            'mypy>=0.900',
        ],
    },
    entry_points={
        'console_scripts': [
            'subrip-build=subrip_captioning.cli.main:main',
            'subrip-web=subrip_captioning.web.app:main',
        ],
    },
    python_requires='>=3.8',
)
