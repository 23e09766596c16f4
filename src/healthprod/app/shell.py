"""Interactive text shell for HealthProd.

Each page of the app is a set of commands. Type `help` for the list.
"""

import cmd
import logging
import shlex
from datetime import datetime, timedelta

from ..activities.models import ActivityType
from ..ai.gateway import DailyReport
from ..analytics.weekly import DayDetail
from ..config.personality import PERSONALITIES
from ..navigation import Page
from .application import HealthProdApp

logger = logging.getLogger(__name__)


def parse_clock_time(value: str, now: datetime) -> datetime:
    """Parse HH:MM as a time today, or an ISO datetime.

    Raises:
        ValueError: If value is neither.
    """
    try:
        parsed = datetime.strptime(value, "%H:%M")
    except ValueError:
        return datetime.fromisoformat(value)
    return now.replace(hour=parsed.hour, minute=parsed.minute, second=0, microsecond=0)


def format_report(report: DailyReport) -> str:
    lines = [
        f"Productivity score: {report.productivity_score}/100",
        "",
        report.summary,
        "",
        f"Recommendation: {report.recommendations}",
        "",
        "Tomorrow:",
    ]
    lines.extend(f"  - {item}" for item in report.next_day_todo_list)
    return "\n".join(lines)


def format_day_detail(detail: DayDetail) -> str:
    lines = [detail.title]
    for activity in detail.activities:
        line = (
            f"  {activity.start_time:%H:%M}-{activity.end_time:%H:%M}  "
            f"{activity.type.value:<9} {activity.duration_hours:.1f}h"
        )
        if activity.notes:
            line += f"  ({activity.notes})"
        lines.append(line)
    lines.append("  Summary: " + ", ".join(f"{s.type.value} {s.hours:.1f}h" for s in detail.summary))
    return "\n".join(lines)


class HealthProdShell(cmd.Cmd):
    """Command loop over a HealthProdApp."""

    intro = "Welcome to HealthProd. Type 'help' to list commands, 'quit' to exit."
    prompt = "healthprod> "

    def __init__(self, app: HealthProdApp, **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self._app = app

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> None:
        print(f"Unknown command: {line.split()[0]}. Type 'help' for commands.")

    def onecmd(self, line: str) -> bool:
        try:
            return super().onecmd(line)
        except (ValueError, KeyError, IndexError, OSError) as e:
            print(f"Error: {e}")
        return False

    # -- dashboard

    def do_dashboard(self, arg: str) -> None:
        """dashboard: show today's hours, streak, coins and the week."""
        self._app.navigate(Page.DASHBOARD)
        board = self._app.dashboard()
        print(f"Hours today: {board.hours_today:.1f}")
        print(f"Streak: {board.streak} day{'s' if board.streak != 1 else ''}")
        print(f"Coins: {board.coins}")
        print("This week:")
        for index, bucket in enumerate(board.week):
            parts = ", ".join(f"{k.value} {v:.1f}h" for k, v in bucket.totals.items())
            print(f"  [{index}] {bucket.label:<7} {bucket.total_hours:5.1f}h  {parts}")
        if board.selected_day is not None:
            print(format_day_detail(board.selected_day))

    def do_day(self, arg: str) -> None:
        """day INDEX: toggle the timeline for a day of the week (0 = oldest)."""
        detail = self._app.select_day(int(arg))
        print(format_day_detail(detail) if detail else "No day selected.")

    def do_log(self, arg: str) -> None:
        """log TYPE START END [NOTES...]: log an activity (times HH:MM or ISO).

        Types: Sleep, Meal, Study, Work, Exercise. An END earlier than START
        is read as the previous day's START.
        """
        parts = shlex.split(arg)
        if len(parts) < 3:
            print("Usage: log TYPE START END [NOTES...]")
            return
        now = datetime.now()
        start = parse_clock_time(parts[1], now)
        end = parse_clock_time(parts[2], now)
        if end <= start and len(parts[1]) <= 5:
            start -= timedelta(days=1)
        activity = self._app.log_activity(
            ActivityType.parse(parts[0]), start, end, " ".join(parts[3:]) or None
        )
        print(f"Logged {activity.type.value} ({activity.duration_hours:.1f}h). +coins!")

    def do_report(self, arg: str) -> None:
        """report: generate today's AI report."""
        report = self._app.generate_report()
        print(format_report(report) if report else "Report unavailable while offline.")

    def do_insights(self, arg: str) -> None:
        """insights: AI habit insights over your activities."""
        print(self._app.insights())

    def do_card(self, arg: str) -> None:
        """card: show today's knowledge card."""
        card = self._app.knowledge_card()
        if card is None:
            print("No knowledge card available offline.")
            return
        print(f"[{card.category.value}] {card.title}\n{card.content}")

    # -- tasks

    def do_tasks(self, arg: str) -> None:
        """tasks: list tasks."""
        self._app.navigate(Page.TASKS)
        tasks = self._app.view.tasks
        if not tasks:
            print("No tasks yet.")
        for task in tasks:
            mark = "x" if task.completed else " "
            deadline = f" (due {task.deadline})" if task.deadline else ""
            print(f"  [{mark}] {task.id[:8]} {task.priority.value:<6} {task.description}{deadline}")

    def do_task(self, arg: str) -> None:
        """task DESCRIPTION [--due DATE]: add a task."""
        description, _, deadline = arg.partition("--due")
        task = self._app.add_task(description, deadline.strip() or None)
        print(f"Added task {task.id[:8]}.")

    def do_done(self, arg: str) -> None:
        """done ID: toggle a task's completed flag (id prefix accepted)."""
        match = next((t for t in self._app.view.tasks if t.id.startswith(arg.strip())), None)
        if match is None or not arg.strip():
            print("No such task.")
            return
        self._app.toggle_task(match.id)
        self.do_tasks("")

    def do_prioritize(self, arg: str) -> None:
        """prioritize: let the AI prioritize incomplete tasks."""
        self._app.prioritize_tasks()
        self.do_tasks("")

    # -- reminders

    def do_reminders(self, arg: str) -> None:
        """reminders: list reminders."""
        reminders = self._app.view.reminders
        if not reminders:
            print("No reminders.")
        for reminder in reminders:
            print(f"  {reminder.id[:8]} {reminder.time} {reminder.title} ({reminder.activity_type.value})")

    def do_remind(self, arg: str) -> None:
        """remind HH:MM TYPE TITLE...: add a daily reminder."""
        parts = shlex.split(arg)
        if len(parts) < 3:
            print("Usage: remind HH:MM TYPE TITLE...")
            return
        reminder = self._app.add_reminder(" ".join(parts[2:]), parts[0], ActivityType.parse(parts[1]))
        print(f"Reminder set for {reminder.time}.")

    def do_unremind(self, arg: str) -> None:
        """unremind ID: delete a reminder (id prefix accepted)."""
        match = next((r for r in self._app.view.reminders if r.id.startswith(arg.strip())), None)
        if match is None or not arg.strip() or not self._app.delete_reminder(match.id):
            print("No such reminder.")
            return
        print("Reminder deleted.")

    # -- gamification

    def do_rewards(self, arg: str) -> None:
        """rewards: list rewards and your coin balance."""
        self._app.navigate(Page.REWARDS)
        print(f"Coins: {self._app.view.coins}")
        for reward in self._app.view.rewards:
            status = f"unlocked: {reward.asset_url}" if reward.unlocked else f"{reward.cost} coins"
            print(f"  {reward.id} {reward.name} ({reward.type.value}) - {status}")

    def do_redeem(self, arg: str) -> None:
        """redeem ID: unlock a reward."""
        if self._app.redeem_reward(arg.strip()):
            print("Reward unlocked!")
        else:
            print("Cannot redeem: unknown, already unlocked, or not enough coins.")

    def do_challenges(self, arg: str) -> None:
        """challenges: show group challenges and leaderboards."""
        self._app.navigate(Page.CHALLENGES)
        for challenge in self._app.view.challenges:
            print(f"{challenge.title} ({challenge.duration} days)\n  {challenge.description}")
            for rank, entry in enumerate(challenge.leaderboard, start=1):
                percent = challenge.progress_percent(entry)
                print(f"  {rank}. {entry.name:<6} {entry.progress}/{challenge.duration} ({percent:.0f}%)")

    # -- focus

    def do_focus(self, arg: str) -> None:
        """focus [start|pause|reset]: show or control the focus timer."""
        self._app.navigate(Page.FOCUS)
        timer = self._app.focus_timer
        action = arg.strip().lower()
        if action == "start":
            timer.start()
        elif action == "pause":
            timer.pause()
        elif action == "reset":
            timer.reset()
        elif action:
            print("Usage: focus [start|pause|reset]")
            return
        state = "running" if timer.is_active else "paused"
        print(f"{timer.phase.value.title()} {timer.display()} ({state})")

    # -- chat and meals

    def do_chat(self, arg: str) -> None:
        """chat MESSAGE: talk to the AI assistant."""
        self._app.navigate(Page.CHAT)
        if not arg.strip():
            for message in self._app.chat_session.messages:
                print(f"{message.role}: {message.text}")
            return
        print(self._app.chat(arg.strip()))

    def do_personality(self, arg: str) -> None:
        """personality [NAME]: show or change the chat personality."""
        if not arg.strip():
            print(f"Current: {self._app.personality.name}")
            print("Available: " + ", ".join(PERSONALITIES))
            return
        personality = self._app.set_personality(arg)
        print(personality.greeting)

    def do_meal(self, arg: str) -> None:
        """meal PATH: analyze a meal photo."""
        self._app.navigate(Page.SCANNER)
        print(self._app.analyze_meal(arg.strip()))

    # -- voice

    def do_voice(self, arg: str) -> None:
        """voice [on|off]: toggle continuous voice listening."""
        action = arg.strip().lower()
        if action == "on":
            started = self._app.start_voice()
            print("Listening..." if started else "Voice input is not available.")
        elif action == "off":
            self._app.stop_voice()
            print("Voice listening off.")
        else:
            listener = self._app.listener
            print(f"Voice: {listener.state.value}. Last heard: {listener.transcript or '-'}")

    def do_hear(self, arg: str) -> None:
        """hear TRANSCRIPT: handle text as a finalized voice transcript."""
        result = self._app.hear(arg)
        if result is None:
            print("(ignored)")
        else:
            print(f"Command '{result.command}': {result.action.value}")

    def do_quit(self, arg: str) -> bool:
        """quit: exit HealthProd."""
        return True

    do_exit = do_quit

    def do_EOF(self, arg: str) -> bool:
        print()
        return True


__all__ = ["HealthProdShell", "format_day_detail", "format_report", "parse_clock_time"]
