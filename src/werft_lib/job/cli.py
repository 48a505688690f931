# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from typing import NoReturn

import click
from click_option_group import optgroup

from werft_lib.client.http import dial
from werft_lib.core.click_format import GNUHelpColorsCommand, GNUHelpColorsGroup
from werft_lib.core.config import CFG
from werft_lib.core.error import WerftError
from werft_lib.core.logger import get_logger
from werft_lib.job.presenter import JobListPresenter
from werft_lib.query.request import ListJobsRequest

logger = get_logger(__name__)


@click.command(
    name="list",
    short_help="List and search for jobs.",
    help=f"""
List and search for jobs using search expressions in the form of `<key><op><value>`.

{click.style("FILTER", fg="green")}   Search expressions. All of them must match.

\b
Available keys are:
  name
  trigger     one of push, manual, unknown
  owner       owner/originator of the job
  phase       one of unknown, preparing, starting, running, done
  repo.owner  owner of the source repository
  repo.repo   name of the source repository
  repo.host   host of the source repository (e.g. github.com)
  repo.ref    source reference, i.e. branch name
  success     one of true, false
  created     time the job started as RFC3339 date

\b
Available operators are:
  ==          checks for equality
  ~=          value must be contained in
  |=          starts with
  =|          ends with

\b
For example:
  phase==running             finds all running jobs
  repo.repo|=werft           finds all jobs on repositories whose names begin with werft
  phase==done success==true  finds all successfully finished jobs
""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument(
    "filter_exprs", nargs=-1, type=str, metavar=click.style("FILTER", fg="green")
)
@optgroup.group(f"{click.style('Ordering and paging', fg='yellow')}")
@optgroup.option(
    "--order",
    "-o",
    "order_exprs",
    type=str,
    multiple=True,
    default=tuple(CFG.list_defaults.order),
    show_default=True,
    help="Order the result list by fields. Specify as `<field>:<asc|desc>`. Can be used multiple times.",
)
@optgroup.option(
    "--limit",
    type=click.IntRange(min=0),
    default=CFG.list_defaults.limit,
    show_default=True,
    help="Limit the number of results.",
)
@optgroup.option(
    "--offset",
    type=click.IntRange(min=0),
    default=CFG.list_defaults.offset,
    show_default=True,
    help="Return results starting later than zero.",
)
@optgroup.group(f"{click.style('Output', fg='yellow')}")
@optgroup.option("--yaml", is_flag=True, help="Output job metadata in YAML format.")
@click.pass_context
def job_list(
    ctx: click.Context,
    filter_exprs: tuple[str, ...],
    order_exprs: tuple[str, ...],
    limit: int,
    offset: int,
    yaml: bool,
) -> NoReturn:
    try:
        # parse everything before contacting the service
        request = ListJobsRequest.fromExpressions(
            filter_exprs, order_exprs, limit=limit, offset=offset
        )

        host = (ctx.obj or {}).get("host")
        with dial(host) as service:
            response = service.listJobs(request)

        if not response.result:
            logger.info("No jobs found.")
            sys.exit(0)

        presenter = JobListPresenter(response.result, response.total)
        if yaml:
            presenter.dumpYaml()
        else:
            presenter.printJobs()

        sys.exit(0)
    except WerftError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


def create_job_group() -> click.Group:
    """
    Create the `job` command group with all its subcommands.

    Returns:
        click.Group: A new group instance.
    """

    @click.group(
        name="job",
        short_help="Inspect werft jobs.",
        cls=GNUHelpColorsGroup,
        help_options_color="bright_blue",
    )
    def job():
        """
        Inspect jobs of the werft service.
        """
        pass

    job.add_command(job_list)
    return job
