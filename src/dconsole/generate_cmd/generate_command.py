"""GenerateCommand encapsulates the validate-then-generate workflow."""

from dconsole.generate_cmd.generators import load_generator


class GenerateCommand:
    """Validates generator options and hands them to the named generator."""

    def __init__(self, opts, generator_name, loader=load_generator):
        self.opts = opts
        self.generator_name = generator_name
        self.loader = loader

    def execute(self):
        """Validate options, then run the generator with them."""
        self.opts.validate()
        generator = self.loader(self.generator_name)
        return generator.generate(self.opts)
