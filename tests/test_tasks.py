import signal
import sys
import uuid

from navicore.tasks import Task, TaskManager, TaskType


def _python_task(code):
    return Task(TaskType.COMMAND, sys.executable, ["-c", code])


def test_command_string():
    task = Task()
    task.set_command("ls", ["-l", "-a"])
    assert task.command_string == "ls -l -a"


def test_command_output_and_finished():
    task = _python_task("import sys; print('hello'); print('oops', file=sys.stderr)")
    out, err, done = [], [], []
    task.stdout.connect(out.append)
    task.stderr.connect(err.append)
    task.finished.connect(done.append)
    task.run()
    assert task.wait(30) == 0
    assert [line.strip() for line in out] == ["hello"]
    assert [line.strip() for line in err] == ["oops"]
    assert done == [task.uuid]


def test_missing_program_reports_error():
    task = Task(TaskType.COMMAND, "/nonexistent/program/for/tests")
    errors = []
    task.error_occurred.connect(errors.append)
    task.run()
    assert len(errors) == 1
    assert task.wait() is None


def test_stop_terminates_running_command():
    task = _python_task("import time; time.sleep(60)")
    done = []
    task.finished.connect(done.append)
    task.run()
    task.stop()
    assert task.wait(30) == -signal.SIGTERM
    assert done == [task.uuid]


def test_non_command_task_does_nothing():
    task = Task(TaskType.COPY)
    task.run()
    assert task.wait() is None


def test_progress_is_emitted():
    task = Task()
    seen = []
    task.progress_changed.connect(seen.append)
    task.set_progress(0.5)
    assert seen == [0.5]
    assert task.progress == 0.5


def test_set_finished_only_when_true():
    task = Task(TaskType.MOVE)
    done = []
    task.finished.connect(done.append)
    task.set_finished(False)
    assert done == []
    task.set_finished(True)
    assert done == [task.uuid]


def test_manager_removes_finished_command():
    manager = TaskManager()
    added, removed = [], []
    manager.task_added.connect(added.append)
    manager.task_removed.connect(removed.append)
    task = _python_task("print('x')")
    manager.add_task(task)
    task.wait(30)
    assert added == [task]
    assert removed == [task]
    assert manager.task_count == 0
    assert manager.task(task.uuid) is None


def test_manager_tracks_and_removes_tasks():
    manager = TaskManager()
    first, second = Task(TaskType.COPY), Task(TaskType.DELETE)
    manager.add_task(first)
    manager.add_task(second)
    assert len(manager) == 2
    assert manager.task(first.uuid) is first
    assert set(manager.tasks()) == {first, second}
    assert manager.remove_task(first.uuid) is True
    assert manager.remove_task(first.uuid) is False
    assert manager.tasks() == [second]


def test_remove_unknown_task():
    assert TaskManager().remove_task(uuid.uuid4()) is False


def test_clear_tasks():
    manager = TaskManager()
    cleared = []
    manager.tasks_cleared.connect(lambda: cleared.append(True))
    assert manager.clear_tasks() is False
    manager.add_task(Task(TaskType.TRASH))
    assert manager.clear_tasks() is True
    assert manager.task_count == 0
    assert cleared == [True]


def test_finishing_non_command_task_removes_it():
    manager = TaskManager()
    task = Task(TaskType.COPY)
    manager.add_task(task)
    task.set_finished(True)
    assert manager.tasks() == []