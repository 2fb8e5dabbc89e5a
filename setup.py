import logging

from setuptools import setup, find_packages

log = logging.getLogger(__name__)

setup(
	name='dicephrase',
	version='0.1.0.dev0',
	packages=find_packages(exclude=['tests', 'tests.*']),
	description='Generates diceware passphrases from cryptographically secure random numbers',
	install_requires=[
		'gconf',
	],
	extras_require={
		'dev': [
			'setuptools',
			'ruff',
			'pytest',
			'pytest-mock',
		]
	},
	entry_points={
		'console_scripts': ['dicephrase=dicephrase.cli:main'],
	},
	package_data={'': ['config.yml', 'data/*']},
)
