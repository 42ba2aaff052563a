from setuptools import setup, find_packages
setup(
    name='firebase-token-creator',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'token_creator': [
            'run/config/*.yaml',
            'run/config/*.ini',
            'run/api/static/*',
        ],
    },
    description='Generate Firebase ID tokens for manual testing from the command line or a browser.',
    python_requires='>=3.9',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'PyJWT>=2.0.0',
        'requests>=2.25.0',
        'firebase-admin>=6.0.0',
        'pydantic>=2.0.0',
        'fastapi>=0.100.0',
        'uvicorn>=0.20.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'httpx>=0.24.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'firebase-token = token_creator.run.auth.cli:main',
            'firebase-token-server = token_creator.run.api.server:main',
        ],
    },
)
