from setuptools import setup, find_packages

setup(
    name='togglipy',
    version='0.1.0',
    description='A CLI tool for summarizing Toggl Track time entries by project and day.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'markdown',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'togglipy=togglipy.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['togglipy.env.example'],
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
