"""
Command-line interface for tiny-huckel.

Usage:
    tiny-huckel calc --molecule benzene --diagram
    tiny-huckel calc --atoms 4 --bonds "0-1,1-2,2-3,3-0" --coefficients
    tiny-huckel calc --molecule naphthalene --plot levels.png
    tiny-huckel list
"""
import argparse
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _build_graph(args):
    from ..core import MolecularGraph
    from ..molecules import MoleculeLibrary

    if args.molecule:
        return MoleculeLibrary.get(args.molecule)
    return MolecularGraph.parse_bonds(args.bonds or "", n_atoms=args.atoms)


def cmd_calc(args):
    """Run a Hückel calculation and print the orbitals."""
    from ..core import HuckelError, calculate
    from ..visualization import (
        format_orbital_table,
        format_coefficients,
        draw_energy_levels,
        plot_energy_levels,
    )

    try:
        graph = _build_graph(args)
        result = calculate(graph)
    except (HuckelError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(result.summary())
    print()
    print(format_orbital_table(result))

    if args.diagram:
        print()
        print(draw_energy_levels(result))

    if args.coefficients:
        for orbital in result.orbitals:
            print()
            print(format_coefficients(orbital))

    if args.plot:
        try:
            plot_energy_levels(result, path=args.plot)
        except ImportError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"\nSaved: {args.plot}")
    return 0


def cmd_list(args):
    """List the built-in molecules."""
    from ..molecules import MoleculeLibrary

    for name in MoleculeLibrary.names():
        graph = MoleculeLibrary.get(name)
        print(f"  {name:<18} {graph.n_atoms:3d} atoms  {MoleculeLibrary.describe(name)}")
    return 0


def cmd_info(args):
    """Show tiny-huckel information."""
    from .. import __version__

    print(f"""
tiny-huckel v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

Simple Hückel molecular orbitals for conjugated hydrocarbons.

  • H[i][i] = α = 0, H[i][j] = β = -1 for bonded atoms
  • One π electron per atom, aufbau filling
  • Energies reported as x in E = α + xβ

Usage:
  tiny-huckel calc --molecule benzene --diagram
  tiny-huckel calc --atoms 3 --bonds "0-1,1-2"
  tiny-huckel list
""")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='tiny-huckel',
        description='Simple Hückel molecular orbital calculator'
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log calculation steps')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Calc command
    calc_parser = subparsers.add_parser('calc', help='Calculate molecular orbitals')
    source = calc_parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--molecule', help='Built-in molecule name (see "list")')
    source.add_argument('--atoms', type=int, help='Number of atoms')
    calc_parser.add_argument('--bonds', help='Bonds as "0-1,1-2,2-3"')
    calc_parser.add_argument('--coefficients', action='store_true',
                             help='Print per-atom coefficients')
    calc_parser.add_argument('--diagram', action='store_true',
                             help='Print an ASCII energy-level diagram')
    calc_parser.add_argument('--plot', metavar='FILE',
                             help='Save an energy-level plot (needs matplotlib)')
    calc_parser.set_defaults(func=cmd_calc)

    # List command
    list_parser = subparsers.add_parser('list', help='List built-in molecules')
    list_parser.set_defaults(func=cmd_list)

    # Info command
    info_parser = subparsers.add_parser('info', help='Show tiny-huckel info')
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)
    if args.command == 'calc' and args.molecule and args.bonds is not None:
        calc_parser.error('--bonds cannot be combined with --molecule')

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('tiny_huckel').setLevel(level)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
