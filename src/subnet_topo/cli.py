"""
子网拓扑命令行
使用 typer 和 rich 导出、查看、解析网络拓扑值
"""

from __future__ import annotations

from typing import Optional, List, Dict
from pathlib import Path

import anyio
import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from . import __version__
from .core.errors import TopologyError
from .core.models import NetworkTopology
from .core.types import PlacementRequest, SubnetType
from .config.settings import AppSettings
from .filesystem import dump_values, load_exported, load_topology, read_values, write_values
from .lookup import NetworkLookupProps
from .utils.logging import configure_logging, get_logger

# 创建应用和控制台
app = typer.Typer(
    name="subnet-topo",
    help="子网拓扑导出/导入与放置解析工具",
    add_completion=False,
    rich_markup_mode="rich"
)
console = Console(stderr=True)

logger = get_logger(__name__)

app_settings = AppSettings()


def _fail(message: str, **context) -> None:
    console.print(f"[red]{message}[/red]")
    logger.error("command_failed", message=message, **context)
    raise typer.Exit(1)


def _parse_tags(values: List[str]) -> Dict[str, str]:
    """把多次传入的 key=value 选项解析为字典"""
    tags: Dict[str, str] = {}
    for value in values:
        key, sep, tag_value = value.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"标签格式应为 key=value: {value}")
        tags[key.strip()] = tag_value.strip()
    return tags


def _load(loader, path: Path):
    """运行异步加载函数，把可预期的错误转换为退出码"""
    try:
        return anyio.run(loader, path)
    except FileNotFoundError:
        _fail(f"文件不存在: {path}", path=str(path))
    except (ValueError, yaml.YAMLError) as e:
        # ValidationError 与 TopologyError 都是 ValueError
        _fail(f"读取失败: {e}", path=str(path))


def _emit(values: Dict, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(dump_values(values, app_settings.output_format), nl=False)
        return
    result = anyio.run(write_values, output, values)
    if not result.is_success:
        _fail(f"写入失败: {result.error}", path=str(output))
    console.print(f"[green]{result.message}[/green]")


def display_topology(topology: NetworkTopology) -> None:
    """显示子网表"""
    table = Table(title=f"网络 {topology.vpc_id}")
    table.add_column("类型", style="cyan")
    table.add_column("可用区", style="magenta")
    table.add_column("子网", style="green")
    table.add_column("组名")

    for subnet_type in SubnetType:
        for subnet in topology.subnets_of(subnet_type):
            table.add_row(
                subnet_type.value,
                subnet.availability_zone,
                subnet.subnet_id,
                subnet.name_or_default(subnet_type),
            )
    console.print(table)


# 回调函数
def version_callback(value: bool):
    """版本回调"""
    if value:
        typer.echo(f"subnet-topo {__version__}")
        raise typer.Exit()


# 全局选项
@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v",
        callback=version_callback, is_eager=True,
        help="显示版本信息"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="详细输出"),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", "-c", help="从配置文件加载设置 (YAML/JSON)"
    ),
):
    """子网拓扑工具"""
    global app_settings
    if config_file and config_file.exists():
        try:
            file_data = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
            app_settings = AppSettings(**file_data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            console.print(f"[red]读取配置文件失败: {e}[/red]")
            raise typer.Exit(1)
    else:
        app_settings = AppSettings()

    configure_logging(verbose or app_settings.verbose, app_settings.json_logs)
    logger.debug("cli_started", config_file=str(config_file) if config_file else None)


@app.command("export")
def export_command(
    topology_file: Path = typer.Argument(..., help="拓扑描述文件 (YAML/JSON)"),
    scope: Optional[str] = typer.Option(None, "--scope", help="导出作用域，vpcId 以导入引用形式导出"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="输出文件，缺省时打印到标准输出"),
):
    """从拓扑描述导出扁平值"""
    topology = _load(load_topology, topology_file)
    effective_scope = scope or app_settings.export_scope
    try:
        exported = topology.export_to(effective_scope)
    except TopologyError as e:
        _fail(f"导出失败: {e}", vpc_id=topology.vpc_id)

    values = exported.to_values()
    if effective_scope:
        values = {"values": values, "outputs": topology.outputs(effective_scope)}
    logger.info("topology_exported", vpc_id=topology.vpc_id, scope=effective_scope)
    _emit(values, output)


@app.command("show")
def show_command(
    bag_file: Path = typer.Argument(..., help="导出值文件 (YAML/JSON)"),
):
    """导入导出值并显示子网表"""
    exported = _load(load_exported, bag_file)
    try:
        topology = NetworkTopology.import_from(exported)
    except TopologyError as e:
        _fail(f"导入失败: {e}", path=str(bag_file))
    display_topology(topology)


@app.command("resolve")
def resolve_command(
    bag_file: Path = typer.Argument(..., help="导出值文件 (YAML/JSON)"),
    subnet_type: Optional[SubnetType] = typer.Option(None, "--type", "-t", help="按子网类型选择"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="按子网组名称选择"),
):
    """解析放置请求，逐行输出子网 id"""
    exported = _load(load_exported, bag_file)
    try:
        topology = NetworkTopology.import_from(exported)
        selected = topology.subnets(PlacementRequest(subnets_to_use=subnet_type, subnet_name=name))
    except TopologyError as e:
        _fail(f"解析失败: {e}", path=str(bag_file))

    logger.info("placement_resolved", vpc_id=topology.vpc_id, count=len(selected))
    for subnet in selected:
        typer.echo(subnet.subnet_id)


@app.command("validate")
def validate_command(
    bag_file: Path = typer.Argument(..., help="导出值文件 (YAML/JSON)"),
):
    """校验导出值能否导入"""
    exported = _load(load_exported, bag_file)
    try:
        topology = NetworkTopology.import_from(exported)
    except TopologyError as e:
        _fail(f"校验失败: {e}", path=str(bag_file))

    console.print(f"[green]校验通过 ✓[/green] {topology}")


@app.command("lookup")
def lookup_command(
    vpc_id: Optional[str] = typer.Option(None, "--vpc-id", help="按网络标识查询"),
    vpc_name: Optional[str] = typer.Option(None, "--vpc-name", help="按 Name 标签查询"),
    is_default: Optional[bool] = typer.Option(None, "--default/--no-default", help="是否为默认网络"),
    tag: List[str] = typer.Option([], "--tag", help="标签过滤 key=value，可多次传入"),
):
    """从上下文文件查询网络并输出导出值"""
    if not app_settings.account or not app_settings.region:
        _fail("需要设置 account 和 region (SUBNET_TOPO_ACCOUNT / SUBNET_TOPO_REGION)")

    props = NetworkLookupProps(vpc_id=vpc_id, vpc_name=vpc_name, is_default=is_default, tags=_parse_tags(tag))
    context = _load(read_values, app_settings.context_file)
    try:
        topology = NetworkTopology.import_from_context(
            context, props, account=app_settings.account, region=app_settings.region
        )
    except TopologyError as e:
        _fail(f"查询失败: {e}", context_file=str(app_settings.context_file))

    display_topology(topology)
    _emit(topology.export_to().to_values(), None)


# 主入口
if __name__ == "__main__":
    app()
