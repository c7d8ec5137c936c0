from pathlib import Path
from types import SimpleNamespace

from nlp2xml.batch import DirectoryWatcher, TextFileHandler, is_watched_file


def created(path, is_directory=False):
    return SimpleNamespace(src_path=str(path), is_directory=is_directory)


def moved(src, dest):
    return SimpleNamespace(src_path=str(src), dest_path=str(dest), is_directory=False)


class TestIsWatchedFile:
    def test_text_file(self):
        assert is_watched_file(Path("inbox/story.txt"))

    def test_dotfile_ignored(self):
        assert not is_watched_file(Path("inbox/.story.txt"))

    def test_temp_file_ignored(self):
        assert not is_watched_file(Path("inbox/story.txt.tmp"))
        assert not is_watched_file(Path("inbox/story.md"))


class TestTextFileHandler:
    def setup_method(self):
        self.batches = []
        self.handler = TextFileHandler(self.batches.append, debounce_seconds=60)

    def test_created_files_batched_on_flush(self):
        self.handler.on_created(created("/in/a.txt"))
        self.handler.on_created(created("/in/b.txt"))
        assert self.batches == []
        self.handler.flush()
        assert self.batches == [[Path("/in/a.txt"), Path("/in/b.txt")]]

    def test_duplicate_events_collapse(self):
        self.handler.on_created(created("/in/a.txt"))
        self.handler.on_created(created("/in/a.txt"))
        self.handler.flush()
        assert self.batches == [[Path("/in/a.txt")]]

    def test_rename_to_final_name_queues_destination(self):
        self.handler.on_moved(moved("/in/a.txt.tmp", "/in/a.txt"))
        self.handler.flush()
        assert self.batches == [[Path("/in/a.txt")]]

    def test_directories_and_other_files_ignored(self):
        self.handler.on_created(created("/in/sub.txt", is_directory=True))
        self.handler.on_created(created("/in/notes.md"))
        self.handler.flush()
        assert self.batches == []

    def test_bytes_paths(self):
        self.handler.on_created(SimpleNamespace(src_path=b"/in/a.txt", is_directory=False))
        self.handler.flush()
        assert self.batches == [[Path("/in/a.txt")]]


class TestDirectoryWatcher:
    def test_process_batch_writes_outputs(self, tmp_path):
        inbox = tmp_path / "in"
        inbox.mkdir()
        story = inbox / "story.txt"
        story.write_bytes(b"The Detective met Harold Wilson.")
        watcher = DirectoryWatcher(inbox, tmp_path / "out")
        watcher.process_batch([story])
        assert watcher.processed == [story]
        assert (tmp_path / "out" / "story.xml").read_text(encoding="utf-8").startswith("<?xml")
        assert (tmp_path / "out" / "story.ner").read_text(encoding="utf-8") == (
            "Detective\nHarold Wilson\n"
        )

    def test_failure_is_recorded(self, tmp_path):
        watcher = DirectoryWatcher(tmp_path)
        missing = tmp_path / "gone.txt"
        watcher.process_batch([missing])
        assert watcher.failed == [missing]
        assert watcher.processed == []

    def test_output_defaults_to_watch_dir(self, tmp_path):
        watcher = DirectoryWatcher(tmp_path)
        assert watcher.output_dir == tmp_path

    def test_dictionary_used(self, tmp_path, pos_dictionary):
        story = tmp_path / "pets.txt"
        story.write_bytes(b"my cat")
        watcher = DirectoryWatcher(tmp_path, dictionary=pos_dictionary)
        watcher.process_batch([story])
        assert (tmp_path / "pets.ner").read_text(encoding="utf-8") == "cat\n"

    def test_start_processes_existing_and_stop(self, tmp_path):
        (tmp_path / "old.txt").write_bytes(b"the Zebra")
        (tmp_path / ".hidden.txt").write_bytes(b"the Zebra")
        watcher = DirectoryWatcher(tmp_path, process_existing=True, debounce_seconds=0.1)
        watcher.start()
        try:
            assert watcher.processed == [tmp_path / "old.txt"]
        finally:
            watcher.stop()
        assert (tmp_path / "old.ner").read_text(encoding="utf-8") == "Zebra\n"
