##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
The `paradox` command-line interface.

Modules:
    argparse_main.py: Builds the top-level parser.
    utils.py: Helpers shared by the commands.
    commands/: One module per command.
"""
