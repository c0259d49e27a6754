from setuptools import setup, find_packages

setup(
    name='togglsum',
    version='0.1.0',
    description='A CLI tool for summing up selected Toggl Track time entries and what they are worth.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'prompt_toolkit>=3.0.29',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'togglsum=togglsum.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        'togglsum': ['togglsum.env.example'],
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
