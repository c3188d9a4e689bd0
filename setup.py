from setuptools import setup, find_packages
setup(
    name='lob-client',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    description='Client library for the lob.com address verification and mailing API.',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'requests>=2.25.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'lob = lob_client.cli:program.run',
        ],
    },
)
