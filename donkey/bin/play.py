import random

from donkey.action import Action, Listener
from donkey.dealer import Dealer
from donkey.game import Engine, Game
from donkey.listeners import DeckView, StatsListener
from donkey.pack import PackLoader, PlayerCount
from donkey.player import Player

import click


class PrintingListener(Listener):
    def publish_action(self, action: Action) -> None:
        print(action)


class DeckListener(DeckView):
    def publish_action(self, action: Action) -> None:
        super().publish_action(action)
        if action.turn is not None:
            sizes = sorted(self.deck_sizes.items())
            print("  - decks: %s" % " ".join("%d=%d" % (number, size) for number, size in sizes))


LISTENER_CONVERSIONS = {
    "print": PrintingListener,
    "decks": DeckListener,
}


class ListenerParam(click.ParamType):
    name = "listener"

    def convert(self, value, param, ctx):
        if value in LISTENER_CONVERSIONS:
            return LISTENER_CONVERSIONS[value]()
        self.fail("%s is not a valid listener" % value, param, ctx)


class PlayerCountParam(click.ParamType):
    name = "players"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            value = str(value)
        try:
            return PlayerCount.parse(value)
        except PlayerCount.Error as e:
            self.fail(str(e), param, ctx)


def load_pack(players, path=None):
    while True:
        if path is None:
            path = click.prompt("Please enter the location of the pack to load")
        try:
            return PackLoader.load(path, players)
        except PackLoader.Error as e:
            click.echo(str(e))
            path = None


@click.group()
@click.option("-s", "--seed", type=int, default=None)
@click.option("-L", "--listener", type=ListenerParam(), multiple=True)
@click.pass_context
def cli(ctx, seed, listener):
    Player.seed(seed)
    ctx.ensure_object(dict)
    ctx.obj["seed"] = seed
    ctx.obj["listeners"] = listener or (PrintingListener(),)


@cli.command()
@click.pass_context
@click.option(
    "-n", "--players", type=PlayerCountParam(), prompt="Please enter the number of players"
)
@click.option("-p", "--pack", "pack_path", default=None)
@click.option("-g", "--games", type=click.IntRange(min=1), default=1)
@click.option("--max-turns", type=click.IntRange(min=0), default=None)
@click.option("--offset", type=int, default=1)
def play(ctx, players, pack_path, games, max_turns, offset):
    pack = load_pack(players, pack_path)
    stats = StatsListener()
    listeners = list(ctx.obj["listeners"]) + [stats]
    try:
        dealer = Dealer(discard_offset=offset)
        dealer.validate(players, pack)
    except Dealer.Error as e:
        raise click.ClickException(str(e))

    for _ in range(games):
        game = Game(players, pack, dealer=dealer, listeners=listeners, max_turns=max_turns)
        try:
            winner = game.run()
        except Engine.TurnLimitExceeded as e:
            raise click.ClickException(str(e))
        click.echo(
            "Player %d won after %d turns (%.1fms)"
            % (winner.pid, stats.last_turns, 1000.0 * game.elapsed)
        )

    if games > 1:
        click.echo("Wins: %s" % stats.summary())


@cli.command()
@click.pass_context
@click.argument("players", type=PlayerCountParam())
@click.argument("path", type=click.Path(dir_okay=False, writable=True))
def generate(ctx, players, path):
    pack = PackLoader.generate(players, random.Random(ctx.obj["seed"]))
    PackLoader.dump(pack, path)
    click.echo("Wrote %d cards to %s" % (len(pack), path))


if __name__ == "__main__":
    cli()
