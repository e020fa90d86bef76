from .segments import EndArrows, end_arrows, merge_intervals, segment_arrows, split_segment, visible_segments

__all__ = ['EndArrows', 'end_arrows', 'merge_intervals', 'segment_arrows', 'split_segment', 'visible_segments']
