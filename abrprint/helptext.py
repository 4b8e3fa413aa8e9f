"""Text of the general help menu and of the per-flag help pages."""

from __future__ import annotations

import textwrap


class HelpError(Exception):
    """Raised when the help flag is used incorrectly."""


def _page(text: str) -> str:
    return "\n" + textwrap.dedent(text).strip("\n") + "\n\n"


GENERAL = _page("""
    Welcome to AbrPrint! This program takes in the output of an Abricate
     analysis and generates a bar graph from the data provided. You can
     provide a single file for graphing, or generate a series of graphs
     from a set of files.

    There are several ways to generate these files. For your convenience
     AbrPrint stores the directory of your Abricate output files. This
     directory cache can be changed to where your files are already. Raw
     input files can be provided as well, details can be found below.

    AbrPrint.exe [source] [options]   -> This will take the file placed
                                          in [source] as the input file,
                                          and will look for it in the
                                          stored source directory. First
                                          it will handle any flags given
                                          in [options].
    AbrPrint.exe                      -> This will generate a graph for
                                          each file in the stored source
                                          directory.

    Available options:
     -i   --raw-input     Absolute path of an input file/directory
     -b   --batch         Generate graphs for each file in the source
     -h   --help [opt]    Makes this help menu. You can provide a flag
                          to get more information on how it works

     -v   --verbose OR --debug        Sends a debug log into the console
                                      during execution
     -d   --set-source-dir [path]     Sets the directory for the source
                                      files to the path provided
     -o   --set-output-dir [path]     Sets the directory that the graphs
                                      will be saved to when created
     -e   --set-file-type [type]      Sets the type of image file that
                                      the graph will save to
     -f   --set-font [font-name]      Set the font that the graph uses
    """)

RAW_INPUT = _page("""
    AbrPrint -i or --raw-input flag

    AbrPrint usually searches for input files using the path stored in
     the configuration file, which is set using the -d/--set-source-dir
     flags. If you want to work with a file outside this without making
     lasting changes to AbrPrint's configuration, you can use this flag
     to provide an absolute path to the file you're working with. For
     example, if you were to run:

          AbrPrint abricateOutput.tab

     AbrPrint may check in ~/path/to/AbrPrint/abricateOutput.tab. If
     instead you were to run:

          AbrPrint -i C:/path/to/abricate_results/abricateOutput.tab

     Then AbrPrint will search to the absolute path that you provided
      instead of in the directory set in the configuration file.
    """)

BATCH = _page("""
    AbrPrint -b or --batch flag

    By default, AbrPrint will only print a graph for one set of Abricate
     results at a time. This might become tedious if you have to process
     lots and lots of result files, so you can instead process files in
     a batch.

    If you were to simply type the command "AbrPrint", then AbrPrint
     will graph a batch of files automatically, but these will be from
     the source directory from AbrPrint's configuration. To graph files
     from another directory, you can run the command:

          AbrPrint ~/path/to/abricate_results -b

     This command will create graphs for each file in the directory you
     give to it.
    """)

HELP = _page("""
    AbrPrint -h or --help flag

    AbrPrint has a lot going on under the hood, and it's designed to be
     as customizable as possible. Since there's a lot that you can do to
     configure AbrPrint's settings, these help menus are here to provide
     more information about all the options you've got available to you.

    If you're curious to get more information about the list of options
     AbrPrint takes, you can simply run:

          AbrPrint -h

     AbrPrint will then give you a general help menu with an overview of
     each of the options and settings you have control over. If you are
     curious about a particular flag, say the --batch option, just run:

          AbrPrint -h --batch
             OR
          AbrPrint -h -b

     AbrPrint will now give you a specific help menu all about the batch
     option.

    If you have a question that doesn't have an answer in any of these
     help menus, you can look through AbrPrint's source code.
    """)

SOURCE_DIR = _page("""
    AbrPrint -d or --set-source-dir flag

    To save you from having to type the full path to a folder every time
     that you want to generate a graph for a file, AbrPrint will store a
     single path that will be used as the default folder to search for a
     specified file. By default, this points to the same folder as the
     executable. If you already have a folder with all of your Abricate
     result files, you can set that folder as the default for AbrPrint.
     All you have to do is run:

          AbrPrint -d ~/absolute/path/to/abr_results/
             OR
          AbrPrint -d ./relative/path/to/abr_results/

     Now, AbrPrint will know to search in your abr_results folder for a
     file you want to generate a graph for. When you run the command:

          AbrPrint MyResultFile.tab

     It will look for ~/absolute/path/to/abr_results/MyResultFile.tab
    """)

FONT = _page("""
    AbrPrint -f or --set-font flag

    AbrPrint allows you to make choices about the font used in the graph
     output. This is Consolas by default, but changing it is a matter of
     placing a TrueType Font file in the same folder as the executable,
     and using the --set-font or -f flag to set the name. If you want to
     change the font to Comic Sans, for example, all you have to do is
     download the Comic_Sans.ttf file, place it next to the AbrPrint exe
     file, then run:

          AbrPrint -f Comic_Sans

     Now, all text in the graph will be printed in Comic Sans.
    """)

OUTPUT_DIR = _page("""
    AbrPrint -o or --set-output-dir flag

    AbrPrint can save your graphs anywhere you need them. When you give
     an output directory, it'll remember it and put all the graphs there
     until you decide to point it somewhere else. AbrPrint will remember
     where you told it to place its output to save you having to provide
     a full file path every single time. If your provided directory does
     not already exist, AbrPrint will create a folder for you, and place
     your graphs inside.

    The names of these graph output files are made using the input file
     names. If you give AbrPrint a file called test123.tab, it will make
     you a graph called test123_bargraph.png or similar. Be careful when
     generating graphs this way. If there already exists a file with the
     name test123_bargraph.png in the output directory, AbrPrint may end
     up overwriting the file that's there.
    """)

FILE_TYPE = _page("""
    AbrPrint -e or --set-file-type flag

    AbrPrint can save your graphs to either a PNG or a JPEG image. The
     default file type is PNG, but can be changed. You can just run:

          AbrPrint -e JPEG
            OR
          AbrPrint -e jpeg

     and now the output of a file called test123.tab will be generated
     as test123_bargraph.jpeg rather than test123_bargraph.png.
    """)

VERBOSE = _page("""
    AbrPrint -v or --verbose or --debug flag

    AbrPrint does lots of things from when you input the filename to when
     it outputs the graph. If things are going wrong, this flag is used
     to check what happened, and where AbrPrint ran into an issue. This
     flag shouldn't be too useful to you most of the time, but could be
     interesting if you're curious about AbrPrint's inner functions.
    """)

_PAGES = {
    ("-i", "--raw-input"): RAW_INPUT,
    ("-b", "--batch"): BATCH,
    ("-h", "--help"): HELP,
    ("-d", "--set-source-dir"): SOURCE_DIR,
    ("-f", "--set-font"): FONT,
    ("-o", "--set-output-dir"): OUTPUT_DIR,
    ("-e", "--set-file-type"): FILE_TYPE,
    ("-v", "--debug", "--verbose"): VERBOSE,
}

_BY_FLAG = {flag: text for flags, text in _PAGES.items() for flag in flags}


def help_text(flag: str | None = None) -> str:
    """Return the general help menu, or the page for `flag`.

    A flag without a page of its own gives an empty string.
    """
    if flag is None:
        return GENERAL
    return _BY_FLAG.get(flag, "")