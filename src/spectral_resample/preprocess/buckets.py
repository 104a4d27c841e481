
def bucket_step(from_: float, to: float, number_of_points: int)->float:
    # 出力点の間隔（= バケット幅）。1 点のときはゾーン幅をそのまま使う
    if number_of_points>1: return (to-from_)/(number_of_points-1)
    return to-from_
