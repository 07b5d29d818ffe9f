import setuptools

setuptools.setup(
	name='gqlvars',
	version='0.1.0',
	packages=[
		'gqlvars',
		'gqlvars.parsing',
		'gqlvars.scanning',
		'gqlvars.support',
	],
	description='An online (line-at-a-time) tokenizer and parser for GraphQL variables, for editor highlighting and indentation',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Topic :: Text Editors",
		"Development Status :: 3 - Alpha",
    ],
)
