"""
Abstraction - violation

One MediaPlayer class exposes buffers, codecs and decoder state as public
attributes. Callers must know the file type, call the matching play method,
drive the decoder state machine by hand and can break the player by poking
its internals.
"""


class MediaPlayer:
    def __init__(self, media_file):
        self.media_file = media_file
        self.is_playing = False
        self.current_position = 0
        self.volume = 70

        # Implementation details, all public
        self.audio_buffer = None
        self.video_buffer = None
        self.audio_codec = None
        self.video_codec = None
        self.decoder_state = "uninitialized"
        self.buffer_size = 8192
        self.frame_rate = 30
        self.audio_sample_rate = 44100
        self.stream_synchronized = False

    def play_audio(self):
        if not self.media_file.endswith((".mp3", ".wav", ".ogg")):
            raise ValueError("Not an audio file")

        self.audio_codec = "MP3" if self.media_file.endswith(".mp3") else \
            "WAV" if self.media_file.endswith(".wav") else "OGG"
        print(f"Initializing {self.audio_codec} codec")

        self.audio_buffer = [None] * self.buffer_size
        print(f"Allocated audio buffer of size {self.buffer_size}")

        self.decoder_state = "initialized"
        print(f"Decoder state: {self.decoder_state}")

        self.load_audio_file()
        self.start_audio_playback()

        self.is_playing = True
        print(f"Playing audio: {self.media_file}")

    def play_video(self):
        if not self.media_file.endswith((".mp4", ".avi", ".mkv")):
            raise ValueError("Not a video file")

        self.video_codec = "H.264" if self.media_file.endswith(".mp4") else \
            "XVID" if self.media_file.endswith(".avi") else "VP9"
        print(f"Initializing {self.video_codec} codec")

        self.video_buffer = [None] * (self.buffer_size * 3)  # RGB
        print(f"Allocated video buffer of size {self.buffer_size * 3}")

        self.decoder_state = "initialized"
        print(f"Decoder state: {self.decoder_state}")

        self.load_video_file()
        self.synchronize_audio_video()
        self.start_video_playback()

        self.is_playing = True
        print(f"Playing video: {self.media_file}")

    def load_audio_file(self):
        print(f"Loading audio file: {self.media_file}")
        print(f"Setting audio sample rate to {self.audio_sample_rate}Hz")
        self.decoder_state = "loaded"

    def load_video_file(self):
        print(f"Loading video file: {self.media_file}")
        print(f"Setting frame rate to {self.frame_rate}fps")
        self.decoder_state = "loaded"

    def synchronize_audio_video(self):
        print("Synchronizing audio and video streams")
        self.stream_synchronized = True

    def start_audio_playback(self):
        if self.decoder_state != "loaded":
            raise RuntimeError("Audio file not loaded")
        print("Starting audio playback engine")
        self.decoder_state = "playing"

    def start_video_playback(self):
        if self.decoder_state != "loaded":
            raise RuntimeError("Video file not loaded")
        if not self.stream_synchronized:
            raise RuntimeError("Streams not synchronized")
        print("Starting video playback engine")
        self.decoder_state = "playing"

    def pause(self):
        if self.decoder_state != "playing":
            raise RuntimeError("Not currently playing")
        print(f"Paused media: {self.media_file}")
        self.is_playing = False
        self.decoder_state = "paused"

    def stop(self):
        if self.decoder_state == "uninitialized":
            raise RuntimeError("Player not initialized")
        print(f"Stopped media: {self.media_file}")
        self.is_playing = False
        self.current_position = 0
        self.decoder_state = "stopped"
        self.cleanup_resources()

    def cleanup_resources(self):
        print("Cleaning up codec resources")
        self.audio_buffer = None
        self.video_buffer = None
        self.stream_synchronized = False
        self.decoder_state = "uninitialized"


def main():
    try:
        print("Creating media player without proper abstraction:")
        player = MediaPlayer("music/song.mp3")

        print("\nPlaying an audio file:")
        player.play_audio()  # caller must pick play_audio over play_video

        print(f"\nCurrent decoder state: {player.decoder_state}")
        print(f"Buffer size: {player.buffer_size}")
        print(f"Audio codec: {player.audio_codec}")

        player.pause()

        print("\nResuming playback:")
        try:
            player.start_audio_playback()
        except RuntimeError as e:
            # paused is not "loaded"; the caller has to know to reload first
            print(f"Error: {e}")
            player.load_audio_file()
            player.start_audio_playback()
        player.is_playing = True

        player.stop()

        print("\nCreating a new player for video:")
        video_player = MediaPlayer("videos/movie.mp4")

        print("\nPlaying a video file:")
        video_player.play_video()

        print("\nDirectly modifying internal state (problematic):")
        video_player.frame_rate = 60
        video_player.buffer_size = 4096
        video_player.decoder_state = "loaded"

        print("\nTrying to pause after breaking internal state:")
        try:
            video_player.pause()
        except RuntimeError as e:
            print(f"Error: {e}")
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
