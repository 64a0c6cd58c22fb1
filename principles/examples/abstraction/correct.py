"""
Abstraction - correct implementation

A MediaPlayer abstraction hides codec setup, buffering and stream
synchronisation. Callers only see play(), pause() and stop(), and a factory
picks the concrete player from the file extension.
"""

from abc import ABC, abstractmethod
from pathlib import PurePosixPath


class MediaPlayer(ABC):
    """Interface shared by every kind of player."""

    def __init__(self, media_file: str):
        self.media_file = media_file
        self.is_playing = False
        self.position = 0

    @abstractmethod
    def play(self) -> None: ...

    @abstractmethod
    def pause(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    @property
    def file_name(self) -> str:
        return PurePosixPath(self.media_file).name

    @property
    def extension(self) -> str:
        return PurePosixPath(self.media_file).suffix.lstrip(".").lower()


def _check_volume(level: int) -> None:
    if not 0 <= level <= 100:
        raise ValueError("Volume must be between 0 and 100")


class AudioPlayer(MediaPlayer):
    def __init__(self, audio_file: str):
        super().__init__(audio_file)
        self.volume = 70
        self.equalizer = {"bass": 50, "mid": 50, "treble": 50}
        print(f"AudioPlayer initialized for file: {self.file_name}")

    def play(self) -> None:
        self._initialize_codec()
        self._load_buffer()
        self._process_stream()
        self.is_playing = True
        print(f"Playing audio: {self.file_name}")

    def pause(self) -> None:
        self.is_playing = False
        print(f"Paused audio: {self.file_name}")

    def stop(self) -> None:
        self.is_playing = False
        self.position = 0
        print(f"Stopped audio: {self.file_name}")

    def set_volume(self, level: int) -> None:
        _check_volume(level)
        self.volume = level
        print(f"Volume set to {level}%")

    def adjust_equalizer(self, bass: int, mid: int, treble: int) -> None:
        self.equalizer = {"bass": bass, "mid": mid, "treble": treble}
        print(f"Equalizer adjusted: Bass={bass}, Mid={mid}, Treble={treble}")

    def _initialize_codec(self) -> None:
        codec = {"mp3": "MP3", "wav": "WAV"}.get(self.extension, "AAC")
        print(f"[Internal] Initializing {codec} codec")

    def _load_buffer(self) -> None:
        print("[Internal] Loading audio buffer")

    def _process_stream(self) -> None:
        print("[Internal] Processing audio stream with equalizer settings")


class VideoPlayer(MediaPlayer):
    RESOLUTIONS = ("480p", "720p", "1080p", "4K")

    def __init__(self, video_file: str):
        super().__init__(video_file)
        self.volume = 70
        self.resolution = "1080p"
        self.subtitles_enabled = False
        print(f"VideoPlayer initialized for file: {self.file_name}")

    def play(self) -> None:
        self._initialize_codec()
        self._setup_buffer()
        self._synchronize_streams()
        self.is_playing = True
        print(f"Playing video: {self.file_name} at {self.resolution}")

    def pause(self) -> None:
        self.is_playing = False
        print(f"Paused video: {self.file_name}")

    def stop(self) -> None:
        self.is_playing = False
        self.position = 0
        print(f"Stopped video: {self.file_name}")

    def set_volume(self, level: int) -> None:
        _check_volume(level)
        self.volume = level
        print(f"Volume set to {level}%")

    def set_resolution(self, resolution: str) -> None:
        if resolution not in self.RESOLUTIONS:
            raise ValueError(f"Invalid resolution. Must be one of: {', '.join(self.RESOLUTIONS)}")
        self.resolution = resolution
        print(f"Resolution set to {resolution}")

    def toggle_subtitles(self, enabled: bool) -> None:
        self.subtitles_enabled = enabled
        print(f"Subtitles {'enabled' if enabled else 'disabled'}")

    def _initialize_codec(self) -> None:
        codec = {"mp4": "H.264", "avi": "XVID"}.get(self.extension, "VP9")
        print(f"[Internal] Initializing {codec} codec")

    def _setup_buffer(self) -> None:
        print(f"[Internal] Setting up video buffer for {self.resolution}")

    def _synchronize_streams(self) -> None:
        print("[Internal] Synchronizing audio and video streams")


AUDIO_EXTENSIONS = {"mp3", "wav", "ogg", "aac"}
VIDEO_EXTENSIONS = {"mp4", "avi", "mkv", "mov"}


def create_player(media_file: str) -> MediaPlayer:
    """Pick the right player for a file so callers never have to."""
    extension = PurePosixPath(media_file).suffix.lstrip(".").lower()
    if extension in AUDIO_EXTENSIONS:
        return AudioPlayer(media_file)
    if extension in VIDEO_EXTENSIONS:
        return VideoPlayer(media_file)
    raise ValueError(f"Unsupported file type: {extension}")


def main():
    print("Creating media players using the factory (abstraction):")
    audio = create_player("music/song.mp3")
    video = create_player("videos/movie.mp4")

    print("\nUsing the audio player:")
    audio.play()
    audio.set_volume(80)
    audio.pause()
    audio.play()
    audio.stop()

    print("\nUsing the video player:")
    video.play()
    video.set_resolution("4K")
    video.toggle_subtitles(True)
    video.pause()
    video.play()
    video.stop()

    print("\nTrying to instantiate the abstract class:")
    try:
        MediaPlayer("file.mp3")
    except TypeError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
